from proofmark.utils.text import content_hash, normalize_text


def test_normalize_text_collapses_whitespace_and_case():
    assert normalize_text("  Hello\n\tWORLD  ") == "hello world"


def test_normalize_text_empty_and_none_safe():
    assert normalize_text("") == ""
    assert normalize_text(None) == ""


def test_content_hash_is_deterministic_and_prefixed():
    a = content_hash("c", "insertion", 4, 3, " ++")
    b = content_hash("c", "insertion", 4, 3, " ++")
    assert a == b
    assert a.startswith("c_")
    assert len(a) == 2 + 12


def test_content_hash_depends_on_every_part():
    assert content_hash("c", "insertion", 4, "x") != content_hash("c", "insertion", 5, "x")
    assert content_hash("c", "insertion", 4, "x") != content_hash("c", "deletion", 4, "x")
