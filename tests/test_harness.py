import csv
import json
from pathlib import Path

import pytest

from wordkeys.harness import (
    check_round, read_rounds, replay_batch, replay_round, write_csv, write_manifest,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_replay_round_train_crane():
    r = replay_round("crane", ["train", " Crane "])
    assert r["target"] == "CRANE"
    assert r["guesses"] == ["TRAIN", "CRANE"]
    assert r["patterns"] == ["-GG-Y", "GGGGG"]
    assert r["confirmed"] == "ACENR"
    assert r["eliminated"] == "IT"
    assert r["untested_guessed"] == ""


def test_replay_round_reports_untested_guessed():
    r = replay_round("CRANE", ["SHEEP"])
    assert r["untested_guessed"] == "E"
    assert r["eliminated"] == "HPS"
    assert replay_round("CRANE", ["SHEEP"], budget_duplicates=True)["patterns"] == ["--Y--"]


@pytest.mark.parametrize("target,guesses", [
    ("CRANE", ["CRANES"]),
    ("CRANE", ["CR4NE"]),
    ("", []),
    ("CRANE", ["CRÄNE"]),
])
def test_check_round_rejects(target, guesses):
    with pytest.raises(ValueError):
        check_round(target, guesses)


def test_replay_batch_sample():
    rounds = [("CRANE", ["TRAIN"]), ("SLATE", ["SLATE"]), ("LEVEL", [])]
    out = replay_batch(rounds, sample=2)
    assert [r["target"] for r in out] == ["CRANE", "SLATE"]
    assert out[1]["patterns"] == ["GGGGG"]


def test_read_rounds(tmp_path: Path):
    p = tmp_path / "rounds.txt"
    _write(p, ["# daily rounds", "crane train crane", "", "slate   # not played yet"])
    assert read_rounds(p) == [("CRANE", ["TRAIN", "CRANE"]), ("SLATE", [])]


def test_read_rounds_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_rounds(tmp_path / "nope.txt")


def test_write_csv_and_manifest(tmp_path: Path):
    results = replay_batch([("CRANE", ["TRAIN", "CRANE"]), ("SLATE", [])])
    path = write_csv(results, str(tmp_path / "out" / "r.csv"), max_guesses=2)

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["target"] == "CRANE"
    assert rows[0]["patt_1"] == "'-GG-Y"
    assert rows[0]["guess_2"] == "CRANE"
    assert rows[1]["num_guesses"] == "0" and rows[1]["guess_1"] == ""

    m = write_manifest({"num_rounds": 2}, str(tmp_path / "m.json"))
    assert json.loads(Path(m).read_text(encoding="utf-8")) == {"num_rounds": 2}
