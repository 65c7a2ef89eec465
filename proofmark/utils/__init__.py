# proofmark/utils/__init__.py
from .similarity import (
    ContextAnchor,
    anchor_similarity,
    build_bigrams,
    build_context_anchor,
    text_similarity,
)
from .text import content_hash, normalize_text

__all__ = [
    "ContextAnchor",
    "anchor_similarity",
    "build_bigrams",
    "build_context_anchor",
    "text_similarity",
    "content_hash",
    "normalize_text",
]
