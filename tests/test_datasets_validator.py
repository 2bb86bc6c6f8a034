from pathlib import Path
from wordhint.datasets import (
    validate_dictionary, pretty_summary, load_dictionary, default_dictionary_path,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_dictionary_happy_path(tmp_path: Path):
    p = tmp_path / "words_5.txt"
    _write(p, ["crane", "raise", "stare"])

    rep = validate_dictionary(5, str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["issues"] == []
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_dictionary_flags_errors(tmp_path: Path):
    p = tmp_path / "words_6.txt"
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, 'RAISER' wrong case
    p.write_text("raiser\ncrane\n???\nRAISER\nplanet\nplanet\n", encoding="utf-8")

    rep = validate_dictionary(6, str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_dictionary_missing_file(tmp_path: Path):
    rep = validate_dictionary(5, str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_load_dictionary_normalises(tmp_path: Path):
    p = tmp_path / "w.txt"
    _write(p, ["Crane", "", "stack", "CRANE", "cranes"])
    assert load_dictionary(p, 5) == ["crane", "stack"]


def test_bundled_dictionary_is_clean():
    rep = validate_dictionary(5, str(default_dictionary_path(5)))
    assert rep["passed"] is True, rep["issues"]
    words = load_dictionary(default_dictionary_path())
    for w in ["class", "fluff", "stack", "myths", "crane", "truck"]:
        assert w in words


def test_load_dictionary_matches_session_normalisation(tmp_path: Path):
    from wordhint.game import GameSession
    p = tmp_path / "w.txt"
    lines = [" Stack", "crane", "STACK", "cranes", "", "truck"]
    _write(p, lines)
    assert load_dictionary(p, 5) == GameSession(lines, secret="crane").dictionary
