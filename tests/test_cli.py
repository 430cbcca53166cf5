import json
from pathlib import Path

import pytest

from apps.cli import replay, show


def test_show_plain(capsys):
    assert show.main(["--target", "crane", "--no-color", "train", "crane"]) == 0
    out = capsys.readouterr().out
    assert "T R A I N   -GG-Y" in out
    assert "C R A N E   GGGGG" in out
    assert "[E]" in out and " . " in out


def test_show_color_smoke(capsys):
    assert show.main(["--target", "CRANE", "SHEEP"]) == 0
    assert "\033[" in capsys.readouterr().out


def test_show_json(capsys):
    show.main(["--target", "CRANE", "--json", "TRAIN"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["rows"][0]["tiles"] == ["absent", "correct", "correct", "absent", "present"]
    assert payload["keyboard"]["T"] == "eliminated"
    assert payload["keyboard"]["R"] == "confirmed"
    assert payload["keyboard"]["N"] == "untested"


def test_show_rejects_wrong_length():
    with pytest.raises(SystemExit) as exc:
        show.main(["--target", "CRANE", "CRANES"])
    assert exc.value.code == 2


def test_replay_writes_outputs(tmp_path: Path, capsys):
    rounds = tmp_path / "rounds.txt"
    rounds.write_text("CRANE TRAIN CRANE\nSLATE CRANE\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    assert replay.main(["--rounds", str(rounds), "--outdir", str(outdir), "--progress", "off"]) == 0
    csvs = list(outdir.glob("replay_*.csv"))
    manifests = list(outdir.glob("replay_*_manifest.json"))
    assert len(csvs) == 1 and len(manifests) == 1
    assert json.loads(manifests[0].read_text(encoding="utf-8"))["num_rounds"] == 2
    assert "Wrote:" in capsys.readouterr().out


def test_replay_bad_round(tmp_path: Path):
    rounds = tmp_path / "rounds.txt"
    rounds.write_text("CRANE TRAINS\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        replay.main(["--rounds", str(rounds), "--outdir", str(tmp_path), "--progress", "off"])


def test_replay_missing_file(tmp_path: Path):
    with pytest.raises(SystemExit):
        replay.main(["--rounds", str(tmp_path / "missing.txt"), "--outdir", str(tmp_path)])
