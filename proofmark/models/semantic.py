from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Line classifications
BLANK = "blank"
PARAGRAPH = "paragraph"
HEADING = "heading"
LIST_ITEM = "list_item"
CODE_FENCE_OPEN = "code_fence_open"
CODE_LINE = "code_line"
TABLE_ROW = "table_row"

# Semantic change kinds. These strings are written to JSON as-is.
BLOCK_TYPE = "block_type"
HEADING_LEVEL = "heading_level"
LIST_NESTING = "list_nesting"
LIST_KIND = "list_kind"
LINK_TARGET = "link_target"
FORMATTING = "formatting"
CODE_FENCE_LANGUAGE = "code_fence_language"
TABLE_STRUCTURE = "table_structure"

ORDERED = "ordered"
UNORDERED = "unordered"


@dataclass(frozen=True)
class Link:
    text: str
    url: str


@dataclass(frozen=True)
class Formatting:
    """Span counts for inline markup on a single line."""

    bold: int = 0
    italic: int = 0
    inline_code: int = 0
    strikethrough: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "bold": self.bold,
            "italic": self.italic,
            "inline_code": self.inline_code,
            "strikethrough": self.strikethrough,
        }


@dataclass(frozen=True)
class SemanticLine:
    line_number: int                       # 1-based
    raw: str
    block_type: str
    heading_level: Optional[int] = None
    list_kind: Optional[str] = None
    list_indent: Optional[int] = None
    code_fence_lang: Optional[str] = None  # set on opening fences only
    table_column_count: Optional[int] = None
    plain_text: str = ""
    links: List[Link] = field(default_factory=list)
    formatting: Formatting = field(default_factory=Formatting)


@dataclass(frozen=True)
class SemanticChange:
    id: str
    type: str
    line: int
    context: str
    before: Dict[str, Any]
    after: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "line": self.line,
            "context": self.context,
            "before": dict(self.before),
            "after": dict(self.after),
        }
