import hashlib
import re

_WS_RE = re.compile(r"\s+")

HASH_LENGTH = 12


def normalize_text(text: str) -> str:
    """Collapse whitespace runs to a single space, trim, and lowercase."""
    if not text:
        return ""
    return _WS_RE.sub(" ", text).strip().lower()


def content_hash(prefix: str, *parts: object) -> str:
    """
    Deterministic short id built from `parts` joined with '|'.
    e.g. content_hash("c", "insertion", 4, 3, " ++") -> "c_1f0e..."
    """
    payload = "|".join(str(p) for p in parts)
    digest = hashlib.sha1(payload.encode("utf-8")).hexdigest()
    return f"{prefix}_{digest[:HASH_LENGTH]}"
