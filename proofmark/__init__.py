from .diff import (
    apply_patch,
    compute_diff,
    group_changes,
    lines_with_changes,
    make_patch,
    offset_to_location,
    reconcile_change_ids,
    summarize_changes,
)
from .errors import PatchFailedError, ProofmarkError
from .models import Change, DiffResult, Location, SemanticChange, SemanticLine
from .semantic import compute_semantic_changes, parse_semantic_lines, summarize_semantic_changes

__all__ = [
    "compute_diff",
    "reconcile_change_ids",
    "offset_to_location",
    "group_changes",
    "lines_with_changes",
    "summarize_changes",
    "make_patch",
    "apply_patch",
    "compute_semantic_changes",
    "parse_semantic_lines",
    "summarize_semantic_changes",
    "Change",
    "DiffResult",
    "Location",
    "SemanticChange",
    "SemanticLine",
    "ProofmarkError",
    "PatchFailedError",
]
