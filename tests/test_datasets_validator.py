from pathlib import Path

from wordlebits.datasets import pretty_summary, read_lines, validate_wordlists, write_lines


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    ans = tmp_path / "answers_5.txt"
    _write(words, ["crane", "raise", "stare", "trace", "cared"])
    _write(ans, ["crane", "raise", "stare"])

    rep = validate_wordlists(5, str(words), str(ans))
    assert rep["passed"] is True
    assert rep["answers_subset_words"] is True
    assert rep["words"]["count"] == 5
    s = pretty_summary(rep)
    assert "N=5" in s and "answers⊆words=True" in s and s.endswith("OK")


def test_dictionary_only(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "slate"])
    rep = validate_wordlists(5, str(words))
    assert rep["passed"] is True
    assert rep["answers"] is None
    assert "answers" not in pretty_summary(rep)


def test_validate_wordlists_flags_errors(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    # wrong length, non-letters, uppercase and a blank line are all invalid
    words.write_text("crane\ncranes\n???\nSlate\n\nslate\n", encoding="utf-8")

    rep = validate_wordlists(5, str(words))
    assert rep["passed"] is False
    assert rep["words"]["invalid_lines"] == 4
    assert [ln for ln, _ in rep["words"]["first_invalid"]] == [2, 3, 4, 5]
    assert any("invalid" in msg for msg in rep["issues"])


def test_duplicates_reported_but_not_fatal(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "crane", "slate"])
    rep = validate_wordlists(5, str(words))
    assert rep["passed"] is True
    assert rep["words"]["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    ans = tmp_path / "answers_5.txt"
    _write(words, ["crane", "stare"])
    _write(ans, ["crane", "raise", "stare"])

    rep = validate_wordlists(5, str(words), str(ans))
    assert rep["passed"] is False
    assert rep["answers_subset_words"] is False
    assert any("subset" in msg for msg in rep["issues"])


def test_missing_files(tmp_path: Path):
    rep = validate_wordlists(5, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert rep["words"]["exists"] is False


def test_read_write_lines(tmp_path: Path):
    p = write_lines(["crane", "slate"], tmp_path / "sub" / "w.txt")
    assert read_lines(p) == ["crane", "slate"]
    Path(p).write_text("crane\n\nslate\n\n\n", encoding="utf-8")
    assert read_lines(p) == ["crane", "", "slate"]
