# proofmark/semantic/parse.py
"""
Line-oriented markdown classification.

A heuristic, single forward pass. Each source line gets a block type plus the
inline facts the differ compares (plain text, links, formatting counts).
It is not a CommonMark parser: nesting, lazy continuation and
indented code blocks are not modelled.
"""
from __future__ import annotations

import re
from typing import List, Optional

from ..models.semantic import (
    BLANK,
    CODE_FENCE_OPEN,
    CODE_LINE,
    HEADING,
    LIST_ITEM,
    ORDERED,
    PARAGRAPH,
    TABLE_ROW,
    UNORDERED,
    Formatting,
    Link,
    SemanticLine,
)

__all__ = [
    "parse_semantic_lines",
    "to_plain_text",
    "extract_links",
    "extract_formatting",
]

_LINE_SPLIT_RE = re.compile(r"\r?\n")

_FENCE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})\s*(?P<lang>[A-Za-z0-9_+-]+)?\s*$")
_HEADING_RE = re.compile(r"^\s{0,3}(#{1,6})\s+(.+)$")
_LIST_RE = re.compile(r"^(\s*)([-*+]|\d+\.)\s+(.+)$")

_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

_BOLD_STAR_RE = re.compile(r"\*\*[^*\n]+\*\*")
_BOLD_UNDER_RE = re.compile(r"__[^_\n]+__")
_STRIKE_RE = re.compile(r"~~[^~\n]+~~")
_CODE_RE = re.compile(r"`[^`\n]+`")
_ITALIC_STAR_RE = re.compile(r"\*[^*\n]+\*")
_ITALIC_UNDER_RE = re.compile(r"_[^_\n]+_")

# Stripping passes for plain text, applied in order.
_PLAIN_SUBS = [
    (re.compile(r"^\s{0,3}#{1,6}\s+"), ""),
    (re.compile(r"^\s*([-*+]|\d+\.)\s+"), ""),
    (_LINK_RE, r"\1"),
    (re.compile(r"(\*\*|__)(.*?)\1"), r"\2"),
    (re.compile(r"(^|[^*])\*([^*\n]+)\*"), r"\1\2"),
    (re.compile(r"(^|[^_])_([^_\n]+)_"), r"\1\2"),
    (re.compile(r"~~([^~\n]+)~~"), r"\1"),
    (re.compile(r"`([^`\n]+)`"), r"\1"),
    (re.compile(r"\|"), " "),
]
_WS_RE = re.compile(r"\s+")


def extract_links(line: str) -> List[Link]:
    """Inline `[text](url)` links in order. Images (`![alt](src)`) are skipped."""
    links: List[Link] = []
    for m in _LINK_RE.finditer(line):
        if m.start() > 0 and line[m.start() - 1] == "!":
            continue
        links.append(Link(text=m.group(1).strip(), url=m.group(2).strip()))
    return links


def extract_formatting(line: str) -> Formatting:
    bold = len(_BOLD_STAR_RE.findall(line)) + len(_BOLD_UNDER_RE.findall(line))
    strike = len(_STRIKE_RE.findall(line))
    code = len(_CODE_RE.findall(line))

    # Italic is counted on what remains once bold/strike spans are removed,
    # otherwise `**x**` would also read as `*x*`.
    rest = _BOLD_STAR_RE.sub("", line)
    rest = _BOLD_UNDER_RE.sub("", rest)
    rest = _STRIKE_RE.sub("", rest)
    italic = len(_ITALIC_STAR_RE.findall(rest)) + len(_ITALIC_UNDER_RE.findall(rest))

    return Formatting(bold=bold, italic=italic, inline_code=code, strikethrough=strike)


def to_plain_text(line: str) -> str:
    """The line's visible text with markdown syntax removed and whitespace collapsed."""
    text = line
    for pattern, repl in _PLAIN_SUBS:
        text = pattern.sub(repl, text)
    return _WS_RE.sub(" ", text).strip()


def _table_columns(raw: str) -> int:
    return sum(1 for cell in raw.split("|") if cell.strip())


def _classify(raw: str, line_number: int) -> SemanticLine:
    trimmed = raw.strip()
    block_type = PARAGRAPH
    heading_level: Optional[int] = None
    list_kind: Optional[str] = None
    list_indent: Optional[int] = None
    columns: Optional[int] = None

    heading = _HEADING_RE.match(raw)
    listing = _LIST_RE.match(raw)

    if not trimmed:
        block_type = BLANK
    elif heading:
        block_type = HEADING
        heading_level = len(heading.group(1))
    elif listing:
        block_type = LIST_ITEM
        list_indent = len(listing.group(1))
        list_kind = ORDERED if listing.group(2)[0].isdigit() else UNORDERED
    elif "|" in trimmed:
        block_type = TABLE_ROW
        columns = _table_columns(raw)

    return SemanticLine(
        line_number=line_number,
        raw=raw,
        block_type=block_type,
        heading_level=heading_level,
        list_kind=list_kind,
        list_indent=list_indent,
        table_column_count=columns,
        plain_text=to_plain_text(raw),
        links=extract_links(raw),
        formatting=extract_formatting(raw),
    )


def parse_semantic_lines(markdown: Optional[str]) -> List[SemanticLine]:
    """Classify every line of `markdown` (None is treated as empty)."""
    parsed: List[SemanticLine] = []
    open_fence: Optional[str] = None  # fence char while inside a code block

    for i, raw in enumerate(_LINE_SPLIT_RE.split(markdown or "")):
        line_number = i + 1
        fence = _FENCE_RE.match(raw)

        if fence and (open_fence is None or fence.group("fence")[0] == open_fence):
            lang = (fence.group("lang") or "").lower()
            opening = open_fence is None
            parsed.append(SemanticLine(
                line_number=line_number,
                raw=raw,
                block_type=CODE_FENCE_OPEN,
                code_fence_lang=(lang or None) if opening else None,
            ))
            open_fence = fence.group("fence")[0] if opening else None
            continue

        if open_fence is not None:
            parsed.append(SemanticLine(line_number=line_number, raw=raw, block_type=CODE_LINE))
            continue

        parsed.append(_classify(raw, line_number))

    return parsed
