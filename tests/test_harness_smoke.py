import csv
import json
from pathlib import Path
from wordhint.game import GameSession
from wordhint.harness import run_case, run_batch, write_csv, write_manifest

# Six words and six turns: a consistent guesser can never run out of turns.
WORDS = ["crane", "raise", "stare", "trace", "cared", "stack"]


def test_run_case_smoke():
    session = GameSession(WORDS)
    r = run_case(session, "crane", seed=42)
    assert "success" in r and "history" in r
    # Should solve within 6 in this tiny set
    assert r["success"] is True
    assert r["history"][-1] == ("CRANE", "CRANE")


def test_run_batch_every_game_is_won():
    results = run_batch(WORDS, WORDS, seed=7)
    assert len(results) == len(WORDS)
    assert all(r["success"] for r in results)
    assert [r["secret"] for r in results] == WORDS


def test_run_batch_sample_prefix():
    assert len(run_batch(WORDS, WORDS, seed=1, sample=3)) == 3


def test_write_outputs(tmp_path: Path):
    results = run_batch(WORDS, WORDS[:2], seed=3)
    p = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=6, N=5)
    with open(p, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["secret"] for r in rows] == WORDS[:2]
    assert "verdict_6" in rows[0]

    m = write_manifest({"num_cases": 2}, str(tmp_path / "m.json"))
    assert json.loads(Path(m).read_text(encoding="utf-8")) == {"num_cases": 2}
