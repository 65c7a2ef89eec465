from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

DELETION = "deletion"
INSERTION = "insertion"


@dataclass(frozen=True)
class Location:
    """Position in the edited text: 1-based line, 0-based column."""

    line: int
    col: int

    def to_dict(self) -> Dict[str, int]:
        return {"line": self.line, "col": self.col}


@dataclass(frozen=True)
class Change:
    """
    One deletion or insertion span, anchored to the edited document.

    For an insertion `edited_offset` is the offset of its first character.
    For a deletion it is where the removed text would sit in the edited
    document, i.e. right after the preceding unchanged text.
    """

    id: str
    type: str             # DELETION or INSERTION
    text: str
    edited_offset: int
    location: Location

    def to_dict(self) -> Dict[str, Any]:
        # edited_offset stays internal; persisted changes carry line/col only.
        return {
            "id": self.id,
            "type": self.type,
            "text": self.text,
            "location": self.location.to_dict(),
        }


@dataclass(frozen=True)
class DiffResult:
    """Changes between two snapshots, plus the snapshots they were computed from."""

    changes: List[Change] = field(default_factory=list)
    deletions: int = 0
    insertions: int = 0
    original_text: str = ""
    edited_text: str = ""

    def is_current(self, original: str, edited: str) -> bool:
        """True if this result was computed from exactly these two texts."""
        return self.original_text == original and self.edited_text == edited

    def to_dict(self) -> Dict[str, Any]:
        return {
            "changes": [c.to_dict() for c in self.changes],
            "deletions": self.deletions,
            "insertions": self.insertions,
        }
