import json
from pathlib import Path

import pytest

from apps.cli import play, run, suggest
from wordhint.game import GameSession


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_suggest_filters_bundled_dictionary(capsys):
    found = suggest.main(["CRANE=*****"])
    assert found and all(not set("crane") & set(w) for w in found)
    assert f"{len(found)} possible word(s)" in capsys.readouterr().out


def test_suggest_custom_dictionary_sorted(tmp_path: Path):
    p = tmp_path / "w.txt"
    _write(p, ["study", "crane", "mouth", "stack"])
    assert suggest.main(["--dictionary", str(p), "--sort", "CRANE=*****"]) == ["mouth", "study"]


@pytest.mark.parametrize("item", ["CRANE", "CRANE=***", "CRANE=?????", "CRANE=x****"])
def test_parse_history_rejects_malformed(item):
    with pytest.raises(ValueError):
        suggest.parse_history([item], 5)


def test_parse_history_uppercases_guess():
    assert suggest.parse_history(["sassy=sa*S*"], 5) == {"SASSY": "sa*S*"}


def test_play_session_messages(monkeypatch, capsys):
    session = GameSession(["stack", "crane", "truck"], secret="truck")
    lines = iter(["cran", "zzzzz", "", "crane", "truck"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    assert play.play(session) is True
    out = capsys.readouterr().out
    assert "Enter a 5-letter word." in out
    assert "Word doesn't exist." in out
    assert "Possible words (3): stack crane truck" in out
    assert "cR***" in out
    assert "Congratulations! You've guessed the word!" in out


def test_play_reveals_word_on_loss(monkeypatch, capsys):
    from wordhint.game import GameConfig
    session = GameSession(["stack", "crane", "truck"], config=GameConfig(max_turns=1),
                          secret="truck")
    monkeypatch.setattr("builtins.input", lambda prompt="": "crane")
    assert play.play(session) is False
    assert "The word was: 'truck'!" in capsys.readouterr().out


def test_run_writes_csv_and_manifest(tmp_path: Path):
    p = tmp_path / "w.txt"
    _write(p, ["crane", "stack", "truck", "taste"])
    results = run.main(["--dictionary", str(p), "--outdir", str(tmp_path / "out"),
                        "--no-progress", "--seed", "1"])
    assert len(results) == 4 and all(r["success"] for r in results)
    manifests = list((tmp_path / "out").glob("run_*_manifest.json"))
    assert len(manifests) == 1
    m = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert m["num_cases"] == 4 and m["wins"] == 4 and m["dictionary"]["passed"] is True
