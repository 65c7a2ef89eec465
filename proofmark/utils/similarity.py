# proofmark/utils/similarity.py
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from .text import normalize_text

DEFAULT_ANCHOR_RADIUS = 32


def build_bigrams(text: str) -> Counter:
    """Multiset of character bigrams. A single character counts as its own gram."""
    if not text:
        return Counter()
    if len(text) == 1:
        return Counter({text: 1})
    return Counter(text[i:i + 2] for i in range(len(text) - 1))


def text_similarity(a: str, b: str) -> float:
    """
    Similarity in [0, 1] between two snippets, compared after normalization.

    Exact match scores 1.0; when one contains the other the score is the
    length ratio; otherwise the Sorensen-Dice coefficient over bigram counts.
    """
    left = normalize_text(a)
    right = normalize_text(b)
    if not left or not right:
        return 0.0
    if left == right:
        return 1.0
    if left in right or right in left:
        return min(len(left), len(right)) / max(len(left), len(right))

    left_grams = build_bigrams(left)
    right_grams = build_bigrams(right)
    total = sum(left_grams.values()) + sum(right_grams.values())
    if not left_grams or not right_grams or total == 0:
        return 0.0
    overlap = sum((left_grams & right_grams).values())
    return 2.0 * overlap / total


@dataclass(frozen=True)
class ContextAnchor:
    """Normalized text on either side of an offset."""

    before: str = ""
    after: str = ""


def build_context_anchor(text: str, offset: int, radius: int = DEFAULT_ANCHOR_RADIUS) -> ContextAnchor:
    if not text or offset < 0:
        return ContextAnchor()
    start = max(0, offset - radius)
    end = min(len(text), offset + radius)
    return ContextAnchor(
        before=normalize_text(text[start:offset]),
        after=normalize_text(text[offset:end]),
    )


def anchor_similarity(left: ContextAnchor, right: ContextAnchor) -> float:
    """Mean similarity over the edges where both anchors have text (0.0 if none)."""
    scores = []
    if left.before and right.before:
        scores.append(text_similarity(left.before, right.before))
    if left.after and right.after:
        scores.append(text_similarity(left.after, right.after))
    if not scores:
        return 0.0
    return sum(scores) / len(scores)
