from .engine import (
    compute_diff,
    group_changes,
    lines_with_changes,
    offset_to_location,
    summarize_changes,
)
from .patch import apply_patch, diff_ops, make_patch
from .reconcile import reconcile_change_ids

__all__ = [
    "compute_diff",
    "group_changes",
    "lines_with_changes",
    "offset_to_location",
    "summarize_changes",
    "apply_patch",
    "diff_ops",
    "make_patch",
    "reconcile_change_ids",
]
