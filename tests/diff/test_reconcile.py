import pytest

from proofmark.diff.reconcile import (
    MIN_SIMILARITY,
    reconcile_change_ids,
    score_candidate,
)
from proofmark.models import DELETION, INSERTION, Change, Location


def _change(id_, type_, text, offset):
    return Change(id=id_, type=type_, text=text, edited_offset=offset, location=Location(1, offset))


def test_no_previous_changes_returns_input():
    nxt = [_change("fresh", INSERTION, "hello", 0)]
    assert reconcile_change_ids(nxt, [], "hello", "") == nxt
    assert reconcile_change_ids(nxt, None, "hello", None) == nxt


def test_matching_change_inherits_previous_id():
    nxt = [_change("fresh", INSERTION, "hello", 10)]
    prev = [_change("old", INSERTION, "hello", 4)]
    out = reconcile_change_ids(nxt, prev, "x" * 20, "y" * 20)
    assert [c.id for c in out] == ["old"]
    # everything but the id is untouched
    assert out[0].edited_offset == 10
    assert out[0].text == "hello"


def test_types_never_match_across_partition():
    nxt = [_change("fresh", INSERTION, "hello", 0)]
    prev = [_change("old", DELETION, "hello", 0)]
    assert [c.id for c in reconcile_change_ids(nxt, prev, "hello", "hello")] == ["fresh"]


def test_similarity_floor_rejects_unrelated_text():
    nxt = [_change("fresh", INSERTION, "apple", 0)]
    prev = [_change("old", INSERTION, "zebra", 0)]
    assert [c.id for c in reconcile_change_ids(nxt, prev, "apple", "zebra")] == ["fresh"]


def test_floor_applies_even_with_identical_context():
    # "abcdefgh" vs "abxyzwvu": one shared bigram, Dice = 2/14, below the floor
    text = "same surroundings here"
    nxt = [_change("fresh", INSERTION, "abcdefgh", 5)]
    prev = [_change("old", INSERTION, "abxyzwvu", 5)]
    out = reconcile_change_ids(nxt, prev, text, text)
    assert out[0].id == "fresh"
    assert 2 / 14 < MIN_SIMILARITY


def test_greedy_first_come_claims_candidate():
    nxt = [
        _change("n1", INSERTION, "same", 0),
        _change("n2", INSERTION, "same", 100),
    ]
    prev = [_change("p1", INSERTION, "same", 100)]
    out = reconcile_change_ids(nxt, prev, "", None)
    # n2 would have scored higher, but n1 came first
    assert [c.id for c in out] == ["p1", "n2"]


def test_each_previous_id_claimed_once():
    nxt = [_change(f"n{i}", INSERTION, "dup", i * 10) for i in range(3)]
    prev = [_change("p0", INSERTION, "dup", 0), _change("p1", INSERTION, "dup", 10)]
    ids = [c.id for c in reconcile_change_ids(nxt, prev, "", None)]
    assert ids == ["p0", "p1", "n2"]


def test_distance_breaks_ties_toward_proximity():
    nxt = [_change("n", INSERTION, "word", 48)]
    prev = [_change("far", INSERTION, "word", 10), _change("near", INSERTION, "word", 50)]
    assert reconcile_change_ids(nxt, prev, "", None)[0].id == "near"


def test_exact_tie_keeps_first_candidate():
    nxt = [_change("n", INSERTION, "word", 50)]
    prev = [_change("first", INSERTION, "word", 40), _change("second", INSERTION, "word", 60)]
    assert reconcile_change_ids(nxt, prev, "", None)[0].id == "first"


def test_context_anchor_separates_identical_text():
    previous_text = "red apple X. green pear X."
    edited_text = "green pear X. red apple."
    # previously an "X" followed each fruit; now only the one after the pear is left
    prev = [
        _change("after_apple", INSERTION, "X", previous_text.index("X")),
        _change("after_pear", INSERTION, "X", previous_text.rindex("X")),
    ]
    nxt = [_change("n", INSERTION, "X", edited_text.index("X"))]
    out = reconcile_change_ids(nxt, prev, edited_text, previous_text)
    # after_apple is closer by offset, but the surroundings match after_pear
    assert out[0].id == "after_pear"


def test_missing_previous_text_zeroes_anchor_score():
    nxt = [_change("n", INSERTION, "hello", 0)]
    prev = [_change("p", INSERTION, "hello", 0)]
    out = reconcile_change_ids(nxt, prev, "hello world", "")
    assert out[0].id == "p"


def test_score_candidate_weights():
    assert score_candidate(1.0, 1.0, 0) == pytest.approx(1.0)
    assert score_candidate(1.0, 0.0, 0) == pytest.approx(0.74)
    assert score_candidate(1.0, 0.0, -100) == pytest.approx(0.74 - 0.015)
