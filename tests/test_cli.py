"""Tests for the command-line entry point."""

import logging
from unittest.mock import patch

import graphviz
import pytest

from fightnet import cli
from fightnet.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch, tmp_path):
    monkeypatch.setenv("FIGHTNET_EXPORT_OUTPUT_DIR", str(tmp_path))
    reset_config()
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    reset_config()


def test_default_session_prints_report(capsys):
    assert cli.main([]) == 0

    out = capsys.readouterr().out
    assert "The closeness centrality of Conor McGregor is 0.25" in out
    assert "Shortest path between Dustin Poirier and Max Holloway is 3 bouts" in out
    assert "[ok] remove node Jose Aldo" in out
    assert "The closeness centrality of Jose Aldo" not in out


def test_custom_commands_and_route(capsys):
    code = cli.main(
        [
            "--no-default-mutations",
            "-c",
            "add node Max Holloway",
            "-c",
            "add edge Max Holloway:Jose Aldo:2",
            "-c",
            "add edge X",
            "--start",
            "Khabib Nurmagomedov",
            "--end",
            "Max Holloway",
            "--all-pairs",
        ]
    )
    out = capsys.readouterr().out

    assert code == 0
    assert "[rejected] add edge X" in out
    assert "Shortest path between Khabib Nurmagomedov and Max Holloway is 4 bouts" in out
    assert "All-pairs shortest paths:" in out


def test_commands_file(tmp_path, capsys):
    commands = tmp_path / "commands.txt"
    commands.write_text("add node Max Holloway\nadd edge Max Holloway:Nate Diaz\n", encoding="utf-8")

    code = cli.main(["--no-default-mutations", "--commands-file", str(commands)])

    assert code == 0
    assert "Shortest path between Dustin Poirier and Max Holloway is 2 bouts" in capsys.readouterr().out


def test_missing_commands_file_returns_error(tmp_path):
    assert cli.main(["--commands-file", str(tmp_path / "missing.txt")]) == 1


def test_undecodable_commands_file_returns_error(tmp_path, capsys):
    commands = tmp_path / "commands.txt"
    commands.write_bytes(b"add node \xff\xfe\n")

    assert cli.main(["--commands-file", str(commands)]) == 1

    captured = capsys.readouterr()
    assert "Could not read commands file" in captured.err
    assert "The closeness centrality" not in captured.out


def test_default_session_adds_then_drops_self_loop(capsys):
    assert cli.main([]) == 0

    out = capsys.readouterr().out
    assert "[ok] add edge Jose Aldo:Jose Aldo" in out
    assert "[ok] remove node Jose Aldo" in out


def test_export_and_failed_render_keep_session_alive(tmp_path, capsys):
    with patch(
        "fightnet.adapters.export.dot_exporter.graphviz.render",
        side_effect=graphviz.ExecutableNotFound(["dot"]),
    ):
        code = cli.main(["--export", "--render"])
    out = capsys.readouterr().out

    assert code == 0
    dot_file = tmp_path / "fightnet.dot"
    assert dot_file.exists()
    assert "\tMax_Holloway_5 -> Conor_McGregor_3" in dot_file.read_text(encoding="utf-8").splitlines()
    assert f"Graph description written to {dot_file}" in out
    assert "Export failed: Failed to run 'dot'" in out


def test_invalid_config_returns_error(monkeypatch, capsys):
    monkeypatch.setenv("FIGHTNET_GRAPH_DEFAULT_EDGE_WEIGHT", "-3")
    reset_config()

    assert cli.main([]) == 2
    assert "Configuration error" in capsys.readouterr().err
