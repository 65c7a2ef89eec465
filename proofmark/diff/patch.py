# proofmark/diff/patch.py
"""Round-trip a DiffResult through diff-match-patch's patch text format."""
from __future__ import annotations

from typing import List, Tuple

from diff_match_patch import diff_match_patch

from ..errors.patch import PatchFailedError
from ..models.change import DELETION, DiffResult

__all__ = ["diff_ops", "make_patch", "apply_patch"]


def diff_ops(result: DiffResult) -> List[Tuple[int, str]]:
    """
    Rebuild the full (op, text) sequence behind `result`.
    Equal spans are recovered from the edited snapshot between change offsets.
    """
    edited = result.edited_text
    ops: List[Tuple[int, str]] = []
    cursor = 0
    for change in result.changes:
        if change.edited_offset > cursor:
            ops.append((diff_match_patch.DIFF_EQUAL, edited[cursor:change.edited_offset]))
            cursor = change.edited_offset
        if change.type == DELETION:
            ops.append((diff_match_patch.DIFF_DELETE, change.text))
        else:
            ops.append((diff_match_patch.DIFF_INSERT, change.text))
            cursor += len(change.text)
    if cursor < len(edited):
        ops.append((diff_match_patch.DIFF_EQUAL, edited[cursor:]))
    return ops


def make_patch(result: DiffResult) -> str:
    """Patch text turning `result.original_text` into `result.edited_text`."""
    if not result.changes:
        return ""
    dmp = diff_match_patch()
    patches = dmp.patch_make(result.original_text, diff_ops(result))
    return dmp.patch_toText(patches)


def apply_patch(original: str, patch: str) -> str:
    """
    Apply patch text produced by make_patch.

    Raises:
        PatchFailedError: the patch text is malformed or a hunk did not apply.
    """
    if not patch:
        return original
    dmp = diff_match_patch()
    try:
        patches = dmp.patch_fromText(patch)
    except ValueError as e:
        raise PatchFailedError(f"Malformed patch text: {e}") from e
    text, applied = dmp.patch_apply(patches, original)
    failed = [i for i, ok in enumerate(applied) if not ok]
    if failed:
        raise PatchFailedError(f"{len(failed)} of {len(applied)} hunks failed to apply (first: #{failed[0] + 1}).")
    return text
