"""
Ids must survive recomputation while the user keeps editing, so that anything
keyed on a change id (annotations, notes) stays attached.
"""
from proofmark import compute_diff


def _insertion(diff, needle):
    return next((c for c in diff.changes if c.type == "insertion" and needle in c.text), None)


def _deletion(diff, needle):
    return next((c for c in diff.changes if c.type == "deletion" and needle in c.text), None)


def _recompute(original, first_edit, second_edit):
    first = compute_diff(original, first_edit)
    second = compute_diff(original, second_edit, first.changes, first.edited_text)
    return first, second


def test_offset_shift_retains_id():
    first, second = _recompute("A\nB\nC", "A\nB changed\nC", "Intro\nA\nB changed\nC")
    before = _insertion(first, "changed")
    after = _insertion(second, "changed")
    assert before is not None and after is not None
    assert after.id == before.id
    assert after.edited_offset != before.edited_offset


def test_existing_changes_keep_identity_when_unrelated_text_added():
    first, second = _recompute(
        "alpha\nbeta\ngamma",
        "alpha\nBETA\ngamma",
        "alpha\nBETA\ngamma\nnew appendix",
    )
    assert _deletion(first, "beta") and _deletion(second, "beta")
    assert _insertion(first, "BETA") and _insertion(second, "BETA")
    assert _deletion(second, "beta").id == _deletion(first, "beta").id
    assert _insertion(second, "BETA").id == _insertion(first, "BETA").id


def test_new_unrelated_change_gets_new_identity():
    first, second = _recompute(
        "one\ntwo\nthree",
        "one\ntwo updated\nthree",
        "prefix\none\ntwo updated\nthree\nsuffix",
    )
    first_ids = {c.id for c in first.changes}
    assert [c for c in second.changes if c.id not in first_ids]


def test_duplicate_insertions_keep_distinct_ids_across_reflow():
    first, second = _recompute(
        "alpha one\nbridge\nalpha two\nfooter",
        "alpha one ++\nbridge\nalpha two ++\nfooter",
        "preface\nalpha one ++ EXTRA\nbridge\nalpha two ++\nfooter",
    )

    def find(diff, line):
        return next(
            (c for c in diff.changes
             if c.type == "insertion" and c.text == " ++" and c.location.line == line),
            None,
        )

    top, bottom = find(first, 1), find(first, 3)
    moved_bottom = find(second, 4)
    assert top and bottom and moved_bottom
    assert top.id != bottom.id
    assert moved_bottom.id == bottom.id
    assert moved_bottom.id != top.id


def test_reconciled_ids_stay_unique():
    _, second = _recompute(
        "alpha one\nbridge\nalpha two\nfooter",
        "alpha one ++\nbridge\nalpha two ++\nfooter",
        "preface\nalpha one ++ EXTRA\nbridge\nalpha two ++\nfooter",
    )
    ids = [c.id for c in second.changes]
    assert len(ids) == len(set(ids))


def test_recompute_with_same_text_is_stable():
    first = compute_diff("draft text here", "final text here")
    again = compute_diff("draft text here", "final text here", first.changes, first.edited_text)
    assert [c.id for c in again.changes] == [c.id for c in first.changes]
