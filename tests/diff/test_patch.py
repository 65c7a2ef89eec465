import pytest

from proofmark import apply_patch, compute_diff, make_patch
from proofmark.diff.patch import diff_ops
from proofmark.errors import PatchFailedError, ProofmarkError

PAIRS = [
    ("", ""),
    ("", "brand new text"),
    ("everything goes", ""),
    ("The cat sat on the mat.", "The dog sat on a mat!"),
    ("alpha\nbeta\ngamma", "alpha\nBETA\ngamma\nnew appendix"),
    ("# Title\n\n- one\n- two\n", "## Title\n\n  - one\n- two\n- three\n"),
    ("naïve café ☕", "naive cafe ☕☕"),
    ("x" * 200 + "middle" + "y" * 200, "x" * 200 + "center" + "y" * 200),
]


@pytest.mark.parametrize("original, edited", PAIRS)
def test_patch_round_trip(original, edited):
    result = compute_diff(original, edited)
    assert apply_patch(original, make_patch(result)) == edited


@pytest.mark.parametrize("original, edited", PAIRS)
def test_diff_ops_rebuild_both_texts(original, edited):
    ops = diff_ops(compute_diff(original, edited))
    assert "".join(text for op, text in ops if op <= 0) == original
    assert "".join(text for op, text in ops if op >= 0) == edited


def test_make_patch_without_changes_is_empty():
    result = compute_diff("same", "same")
    assert make_patch(result) == ""
    assert apply_patch("same", "") == "same"


def test_apply_patch_rejects_malformed_text():
    with pytest.raises(PatchFailedError, match="Malformed"):
        apply_patch("abc", "this is not a patch")


def test_apply_patch_reports_failed_hunks():
    patch = make_patch(compute_diff("The quick brown fox", "The quick red fox"))
    with pytest.raises(ProofmarkError):
        apply_patch("0123456789", patch)
