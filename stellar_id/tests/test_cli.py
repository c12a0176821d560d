"""
Tests for the stellar-id command-line interface.
"""

import json
import logging

import pytest
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logger(monkeypatch):
    # keep log lines out of captured output
    monkeypatch.setenv("STELLAR_ID_LOG_LEVEL", "WARNING")
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_generate_default():
    result = runner.invoke(app, ["generate", "hello"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "STAR-2322-ALTAIR"


def test_generate_options():
    result = runner.invoke(app, ["generate", "hello", "--prefix", "COSMIC", "--case", "lower"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "cosmic-2322-altair"


def test_generate_custom_stars_and_format():
    result = runner.invoke(
        app, ["generate", "hello", "--star", "ONE", "--star", "TWO", "--format", "{star}_{hash}"]
    )
    assert result.exit_code == 0
    # 2322 % 2 == 0
    assert result.stdout.strip() == "ONE_2322"


def test_generate_json():
    result = runner.invoke(app, ["generate", "hello", "--length", "30", "--special", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data == {"input": "hello", "id": "STA+-232{-ALT,IR()!+-=[^{}|;_,"}


def test_generate_invalid_prefix_exit_code():
    result = runner.invoke(app, ["generate", "x", "--prefix", "bad prefix!", "--json"])
    assert result.exit_code == 2
    assert "Prefix" in json.loads(result.stdout)["error"]


def test_generate_invalid_length():
    result = runner.invoke(app, ["generate", "x", "--length", "101"])
    assert result.exit_code == 2
    assert "Length" in result.stdout


def test_batch(tmp_path):
    input_file = tmp_path / "inputs.txt"
    input_file.write_text("hello\n\nx\n", encoding="utf-8")

    result = runner.invoke(app, ["batch", str(input_file), "--json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["successes"] == [
        {"input": "hello", "id": "STAR-2322-ALTAIR"},
        {"input": "x", "id": "STAR-0120-SIRIUS"},
    ]
    assert data["failures"] == []


def test_batch_missing_file(tmp_path):
    result = runner.invoke(app, ["batch", str(tmp_path / "missing.txt"), "--json"])
    assert result.exit_code == 2
    assert "not found" in json.loads(result.stdout)["error"]


def test_validate():
    assert runner.invoke(app, ["validate", "STAR-2322-ALTAIR"]).exit_code == 0
    assert runner.invoke(app, ["validate", "star-2322-altair"]).exit_code == 1


def test_parse_json():
    result = runner.invoke(app, ["parse", "MY-APP-0001-VEGA", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"prefix": "MY-APP", "hash": "0001", "star_name": "VEGA"}


def test_parse_invalid():
    result = runner.invoke(app, ["parse", "nope"])
    assert result.exit_code == 1


def test_stars_json():
    result = runner.invoke(app, ["stars", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["stars"][0] == "SIRIUS"


def test_stars_real_json():
    result = runner.invoke(app, ["stars", "--real", "--json"])
    assert result.exit_code == 0
    stars = json.loads(result.stdout)["stars"]
    assert stars[2]["name"] == "ARCTURUS"
    assert stars[2]["constellation"] == "Boötes"


def test_star_lookup():
    result = runner.invoke(app, ["star", "vega", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["constellation"] == "Lyra"

    assert runner.invoke(app, ["star", "nowhere"]).exit_code == 1


def test_algorithms():
    result = runner.invoke(app, ["algorithms", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"algorithms": ["simple", "djb2", "fnv1a"]}


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "Stellar ID CLI" in result.stdout


def test_batch_directory_path(tmp_path):
    result = runner.invoke(app, ["batch", str(tmp_path), "--json"])
    assert result.exit_code == 2
    assert "Cannot read input file" in json.loads(result.stdout)["error"]


def test_batch_non_utf8_file(tmp_path):
    input_file = tmp_path / "latin1.txt"
    input_file.write_bytes(b"caf\xe9\n")

    result = runner.invoke(app, ["batch", str(input_file), "--json"])
    assert result.exit_code == 2
    assert "UTF-8" in json.loads(result.stdout)["error"]
