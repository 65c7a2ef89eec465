from .differ import compute_semantic_changes, pair_by_plain_text, summarize_semantic_changes
from .parse import extract_formatting, extract_links, parse_semantic_lines, to_plain_text

__all__ = [
    "compute_semantic_changes",
    "pair_by_plain_text",
    "summarize_semantic_changes",
    "extract_formatting",
    "extract_links",
    "parse_semantic_lines",
    "to_plain_text",
]
