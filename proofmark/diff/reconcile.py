# proofmark/diff/reconcile.py
"""
Carry change ids forward across recomputation.

Every keystroke elsewhere in the document shifts the offsets of downstream
changes, so an id derived from the offset would change from one diff to the
next and orphan whatever was keyed on it (annotations, review notes). Here a
freshly computed change inherits the id of the previous change that looks
like the same edit: same type, similar text, similar surroundings, nearby.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

from .._logging import resolve_logger
from ..models.change import Change
from ..utils.similarity import (
    DEFAULT_ANCHOR_RADIUS,
    ContextAnchor,
    anchor_similarity,
    build_context_anchor,
    text_similarity,
)

__all__ = ["reconcile_change_ids", "score_candidate"]

MIN_SIMILARITY = 0.34
TEXT_WEIGHT = 0.74
ANCHOR_WEIGHT = 0.26
DISTANCE_WEIGHT = 0.00015
ANCHOR_RADIUS = DEFAULT_ANCHOR_RADIUS


def score_candidate(
    text_score: float,
    context_score: float,
    offset_delta: int,
) -> float:
    """Composite match score; the distance penalty breaks ties toward proximity."""
    return (
        text_score * TEXT_WEIGHT
        + context_score * ANCHOR_WEIGHT
        - abs(offset_delta) * DISTANCE_WEIGHT
    )


def reconcile_change_ids(
    next_changes: Sequence[Change],
    previous_changes: Optional[Sequence[Change]],
    edited_text: str,
    previous_edited_text: Optional[str],
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[Change]:
    """
    Return `next_changes` with ids replaced by matching ids from `previous_changes`.

    Matching is greedy in input order: each next change takes the best
    unclaimed previous change of the same type whose text similarity clears
    MIN_SIMILARITY. Changes without a match keep their fresh id.
    Without a previous snapshot the context anchors score 0 for every pair.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    if not previous_changes:
        return list(next_changes)

    by_type: Dict[str, List[int]] = {}
    for idx, prev in enumerate(previous_changes):
        by_type.setdefault(prev.type, []).append(idx)

    has_context = isinstance(previous_edited_text, str) and len(previous_edited_text) > 0
    previous_anchors: List[ContextAnchor] = []
    if has_context:
        previous_anchors = [
            build_context_anchor(previous_edited_text, prev.edited_offset, ANCHOR_RADIUS)
            for prev in previous_changes
        ]

    claimed: set[int] = set()
    result: List[Change] = []
    inherited = 0

    for change in next_changes:
        candidates = by_type.get(change.type)
        if not candidates:
            result.append(change)
            continue

        anchor = build_context_anchor(edited_text, change.edited_offset, ANCHOR_RADIUS)
        best_idx: Optional[int] = None
        best_score = float("-inf")

        for idx in candidates:
            if idx in claimed:
                continue
            candidate = previous_changes[idx]
            text_score = text_similarity(change.text, candidate.text)
            if text_score <= 0 or text_score < MIN_SIMILARITY:
                continue
            context_score = anchor_similarity(anchor, previous_anchors[idx]) if has_context else 0.0
            score = score_candidate(
                text_score,
                context_score,
                candidate.edited_offset - change.edited_offset,
            )
            # Strict '>' keeps the earliest candidate on ties.
            if score > best_score:
                best_score = score
                best_idx = idx

        if best_idx is None:
            result.append(change)
            continue

        claimed.add(best_idx)
        matched = previous_changes[best_idx]
        inherited += 1
        lg.debug(
            "change %s at %d inherits %s (score %.3f)",
            change.id, change.edited_offset, matched.id, best_score,
        )
        result.append(replace(change, id=matched.id))

    lg.debug(
        "reconciled %d changes against %d previous: %d inherited, %d fresh",
        len(result), len(previous_changes), inherited, len(result) - inherited,
    )
    return result
