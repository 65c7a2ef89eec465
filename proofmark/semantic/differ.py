# proofmark/semantic/differ.py
"""
Structural diff between two markdown snapshots.

Reports edits a character diff cannot name: a heading demoted to a paragraph,
a list item re-nested, a link retargeted, emphasis removed, a fence
language swapped. Lines are paired across snapshots by their plain text, so
only lines whose visible words survived the edit are compared.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

from .._logging import resolve_logger
from ..models.semantic import (
    BLOCK_TYPE,
    CODE_FENCE_LANGUAGE,
    CODE_FENCE_OPEN,
    FORMATTING,
    HEADING,
    HEADING_LEVEL,
    LINK_TARGET,
    LIST_ITEM,
    LIST_KIND,
    LIST_NESTING,
    TABLE_ROW,
    TABLE_STRUCTURE,
    Link,
    SemanticChange,
    SemanticLine,
)
from ..utils.text import content_hash, normalize_text
from .parse import parse_semantic_lines

__all__ = [
    "compute_semantic_changes",
    "pair_by_plain_text",
    "summarize_semantic_changes",
]

LinePair = Tuple[SemanticLine, SemanticLine]


def _semantic_change_id(change_type: str, line: int, context: str, before: Any, after: Any) -> str:
    return content_hash(
        "s",
        change_type,
        line,
        context,
        json.dumps(before, sort_keys=True),
        json.dumps(after, sort_keys=True),
    )


def pair_by_plain_text(original: List[SemanticLine], edited: List[SemanticLine]) -> List[LinePair]:
    """
    Match original lines to edited lines with the same normalized plain text.

    Each edited line is used at most once; among several candidates the one
    with the closest line number wins (first found on ties). Lines with no
    visible text are never paired.
    """
    buckets: Dict[str, List[int]] = {}
    for idx, line in enumerate(edited):
        key = normalize_text(line.plain_text)
        if key:
            buckets.setdefault(key, []).append(idx)

    used: set[int] = set()
    pairs: List[LinePair] = []
    for before in original:
        key = normalize_text(before.plain_text)
        if not key or key not in buckets:
            continue
        best_idx: Optional[int] = None
        best_distance = None
        for idx in buckets[key]:
            if idx in used:
                continue
            distance = abs(edited[idx].line_number - before.line_number)
            if best_distance is None or distance < best_distance:
                best_distance = distance
                best_idx = idx
        if best_idx is None:
            continue
        used.add(best_idx)
        pairs.append((before, edited[best_idx]))
    return pairs


def _link_map(links: List[Link]) -> Dict[str, str]:
    # Later links with the same text override earlier ones.
    return {link.text.lower(): link.url for link in links if link.text}


class _Collector:
    """Accumulates changes, dropping exact duplicates by id."""

    def __init__(self) -> None:
        self.changes: List[SemanticChange] = []
        self._seen: set[str] = set()

    def add(self, change_type: str, line: int, context: str, before: Dict[str, Any], after: Dict[str, Any]) -> None:
        change_id = _semantic_change_id(change_type, line, context, before, after)
        if change_id in self._seen:
            return
        self._seen.add(change_id)
        self.changes.append(SemanticChange(
            id=change_id,
            type=change_type,
            line=line,
            context=context,
            before=before,
            after=after,
        ))


def _compare_pair(before: SemanticLine, after: SemanticLine, out: _Collector) -> None:
    context = after.plain_text or before.plain_text or after.raw.strip() or before.raw.strip()
    line = after.line_number or before.line_number

    if before.block_type != after.block_type:
        out.add(BLOCK_TYPE, line, context,
                {"block_type": before.block_type}, {"block_type": after.block_type})

    both = before.block_type if before.block_type == after.block_type else None

    if both == HEADING and before.heading_level != after.heading_level:
        out.add(HEADING_LEVEL, line, context,
                {"level": before.heading_level}, {"level": after.heading_level})

    if both == LIST_ITEM:
        if before.list_indent != after.list_indent:
            out.add(LIST_NESTING, line, context,
                    {"indent": before.list_indent}, {"indent": after.list_indent})
        if before.list_kind != after.list_kind:
            out.add(LIST_KIND, line, context,
                    {"list_kind": before.list_kind}, {"list_kind": after.list_kind})

    if both == TABLE_ROW and before.table_column_count != after.table_column_count:
        out.add(TABLE_STRUCTURE, line, context,
                {"columns": before.table_column_count}, {"columns": after.table_column_count})

    after_links = _link_map(after.links)
    for text, before_url in _link_map(before.links).items():
        if text not in after_links:
            continue
        after_url = after_links[text]
        if before_url != after_url:
            out.add(LINK_TARGET, line, context,
                    {"link_text": text, "url": before_url}, {"link_text": text, "url": after_url})

    if before.formatting != after.formatting:
        out.add(FORMATTING, line, context,
                before.formatting.to_dict(), after.formatting.to_dict())


def _compare_fences(original: List[SemanticLine], edited: List[SemanticLine], out: _Collector) -> None:
    # Fence bodies rarely survive plain-text pairing, so fences are matched
    # by ordinal instead: the i-th delimiter line against the i-th.
    before_fences = [ln for ln in original if ln.block_type == CODE_FENCE_OPEN]
    after_fences = [ln for ln in edited if ln.block_type == CODE_FENCE_OPEN]
    for i, (before, after) in enumerate(zip(before_fences, after_fences)):
        before_lang = before.code_fence_lang or None
        after_lang = after.code_fence_lang or None
        if before_lang != after_lang:
            out.add(CODE_FENCE_LANGUAGE, after.line_number, f"code fence #{i + 1}",
                    {"language": before_lang}, {"language": after_lang})


def compute_semantic_changes(
    original: Optional[str],
    edited: Optional[str],
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[SemanticChange]:
    """
    Structural changes between two markdown snapshots, sorted by edited line
    then by change type.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    original_lines = parse_semantic_lines(original or "")
    edited_lines = parse_semantic_lines(edited or "")
    pairs = pair_by_plain_text(original_lines, edited_lines)
    lg.debug(
        "paired %d of %d original lines with %d edited lines",
        len(pairs), len(original_lines), len(edited_lines),
    )

    out = _Collector()
    for before, after in pairs:
        _compare_pair(before, after, out)
    _compare_fences(original_lines, edited_lines, out)

    changes = sorted(out.changes, key=lambda c: (c.line, c.type))
    lg.debug("found %d semantic changes", len(changes))
    return changes


def summarize_semantic_changes(changes: List[SemanticChange]) -> Dict[str, int]:
    """Count of changes per type, in order of first appearance."""
    counts: Dict[str, int] = {}
    for change in changes:
        counts[change.type] = counts.get(change.type, 0) + 1
    return counts
