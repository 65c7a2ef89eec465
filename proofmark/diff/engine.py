# proofmark/diff/engine.py
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Set

from diff_match_patch import diff_match_patch

from .._logging import resolve_logger
from ..models.change import DELETION, INSERTION, Change, DiffResult, Location
from ..utils.text import content_hash
from .reconcile import reconcile_change_ids

__all__ = [
    "compute_diff",
    "offset_to_location",
    "group_changes",
    "lines_with_changes",
    "summarize_changes",
]

DEFAULT_DIFF_TIMEOUT = 1.0


def _new_differ(timeout: float) -> diff_match_patch:
    dmp = diff_match_patch()
    dmp.Diff_Timeout = timeout
    return dmp


def _change_id(change_type: str, text: str, offset: int) -> str:
    # Fallback identity only; reconcile_change_ids replaces it when a
    # previous change matches.
    return content_hash("c", change_type, offset, len(text), text)


def offset_to_location(text: str, offset: int) -> Location:
    """Line/column of `offset` in `text`. Offsets past the end clamp to the end."""
    end = max(0, min(offset, len(text)))
    head = text[:end]
    line = head.count("\n") + 1
    last_nl = head.rfind("\n")
    col = end - (last_nl + 1)
    return Location(line=line, col=col)


def compute_diff(
    original: str,
    edited: str,
    previous_changes: Optional[Sequence[Change]] = None,
    previous_edited_text: Optional[str] = None,
    *,
    diff_timeout: float = DEFAULT_DIFF_TIMEOUT,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> DiffResult:
    """
    Diff `original` against `edited` and return addressable changes.

    Runs a character diff followed by semantic cleanup, then walks the
    operations with a cursor into the edited text: equal spans and insertions
    advance it, deletions are anchored at it without advancing.

    Pass the previous result's `changes` and `edited_text` to keep ids stable
    across recomputation (see reconcile_change_ids).
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)

    if original == edited:
        lg.debug("texts identical; nothing to diff")
        return DiffResult(original_text=original, edited_text=edited)

    dmp = _new_differ(diff_timeout)
    diffs = dmp.diff_main(original, edited)
    dmp.diff_cleanupSemantic(diffs)

    changes: List[Change] = []
    deletions = insertions = 0
    edited_offset = 0

    for op, text in diffs:
        if op == dmp.DIFF_DELETE:
            changes.append(Change(
                id=_change_id(DELETION, text, edited_offset),
                type=DELETION,
                text=text,
                edited_offset=edited_offset,
                location=offset_to_location(edited, edited_offset),
            ))
            deletions += 1
        elif op == dmp.DIFF_INSERT:
            changes.append(Change(
                id=_change_id(INSERTION, text, edited_offset),
                type=INSERTION,
                text=text,
                edited_offset=edited_offset,
                location=offset_to_location(edited, edited_offset),
            ))
            insertions += 1
            edited_offset += len(text)
        else:
            edited_offset += len(text)

    lg.debug("diff produced %d deletions, %d insertions", deletions, insertions)

    changes = reconcile_change_ids(
        changes,
        previous_changes,
        edited,
        previous_edited_text,
        logger=logger,
        log=log,
    )
    return DiffResult(
        changes=changes,
        deletions=deletions,
        insertions=insertions,
        original_text=original,
        edited_text=edited,
    )


# =============================
# Views over a change list
# =============================

def group_changes(changes: Sequence[Change]) -> List[List[Change]]:
    """
    Split changes into display groups. A deletion followed directly by an
    insertion at the same location is one replacement; anything else stands alone.
    """
    groups: List[List[Change]] = []
    current: List[Change] = []
    for change in changes:
        if current:
            last = current[-1]
            if last.type == DELETION and change.type == INSERTION and last.location == change.location:
                current.append(change)
                continue
            groups.append(current)
        current = [change]
    if current:
        groups.append(current)
    return groups


def lines_with_changes(changes: Sequence[Change]) -> Set[int]:
    """Edited line numbers touched by any change, multi-line spans included."""
    lines: Set[int] = set()
    for change in changes:
        first = change.location.line
        lines.update(range(first, first + change.text.count("\n") + 1))
    return lines


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"


def summarize_changes(result: DiffResult) -> str:
    parts = []
    if result.deletions > 0:
        parts.append(_plural(result.deletions, "deletion"))
    if result.insertions > 0:
        parts.append(_plural(result.insertions, "insertion"))
    return ", ".join(parts) or "No changes"
