import io
import json

import pytest

from homevoice import __main__ as cli
from homevoice import executor, main


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch):
    monkeypatch.setattr(executor, "_LOG_PATH", str(tmp_path / "homevoice.log"))


@pytest.fixture
def devices_file(tmp_path):
    path = tmp_path / "devices.json"
    path.write_text(json.dumps([
        {"id": 1, "name": "Kitchen Fan", "state": 0},
        {"id": 2, "name": "Bedroom Lamp", "state": 1},
    ]))
    return path


def test_main_loop(devices_file, capsys):
    stream = io.StringIO("turn on the kitchen fan\n\nis the kitchen fan on\nquit\nturn off the lamp\n")
    assert main.main(devices_file, stream) == 0
    out = capsys.readouterr().out
    assert "Loaded 2 device(s)" in out
    assert "[setting] Kitchen Fan turned ON" in out
    assert "[querying] Kitchen Fan is currently ON" in out
    # nothing after "quit" is processed
    assert "Bedroom Lamp turned OFF" not in out


def test_main_missing_devices(tmp_path, capsys):
    assert main.main(tmp_path / "nope.json", io.StringIO("")) == 1
    assert "Could not load devices" in capsys.readouterr().out


def test_cli_parse(devices_file, capsys):
    assert cli._run_parse("turn on the kitchen fan", devices_file) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "> turn on the kitchen fan",
        "intent: set_state",
        "targets: Kitchen Fan",
        "state: ON",
    ]


def test_cli_parse_missing_devices(tmp_path, capsys):
    assert cli._run_parse("turn on all lights", tmp_path / "nope.json") == 1
    assert "Could not load devices" in capsys.readouterr().out


def test_cli_parse_malformed_devices(tmp_path, capsys):
    path = tmp_path / "devices.json"
    path.write_text("{not json")
    assert cli._run_parse("turn on all lights", path) == 1
    assert "Could not load devices" in capsys.readouterr().out


def test_cli_audio_missing_devices(tmp_path, capsys):
    # fails before any model is loaded
    assert cli._run_audio("command.wav", tmp_path / "nope.json") == 1
    assert "Could not load devices" in capsys.readouterr().out
