from .change import DELETION, INSERTION, Change, DiffResult, Location
from .semantic import Formatting, Link, SemanticChange, SemanticLine

__all__ = [
    "DELETION",
    "INSERTION",
    "Change",
    "DiffResult",
    "Location",
    "Formatting",
    "Link",
    "SemanticChange",
    "SemanticLine",
]
