"""
Tests for the weighted-graph command-line entry point.
"""

import json

import pytest

from weighted_graph import cli, config


@pytest.fixture
def chain_file(tmp_path):
    path = tmp_path / "chain.json"
    path.write_text(
        json.dumps(
            {
                "gtype": "Direct",
                "nodes": {"Extended": [1, 2, 3, 4]},
                "arcs": {"Weighted": [[0, 1, 1], [1, 2, 2], [2, 3, 3]]},
            }
        )
    )
    return path


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 0
    assert "weighted-graph" in capsys.readouterr().out


def test_dot_command(chain_file, capsys):
    assert cli.main(["dot", str(chain_file), "--backend", "sparse"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("digraph {")
    assert '\tn0 -> n1 [label="1"];' in out


def test_costs_command(chain_file, capsys):
    assert cli.main(["costs", str(chain_file), "0", "1", "2", "3"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "0\t1\t1.0"
    assert lines[2] == "0\t3\t6.0"
    assert len(lines) == 7
    assert lines[-1] == "[costs] total=6.0"


def test_costs_command_reports_missing_arc(chain_file, capsys):
    assert cli.main(["costs", str(chain_file), "3", "0"]) == 1
    assert "[error]" in capsys.readouterr().err


def test_convert_command_json(chain_file, capsys):
    assert cli.main(["convert", str(chain_file)]) == 0

    record = json.loads(capsys.readouterr().out)
    assert record["gtype"] == "Direct"
    assert record["nodes"] == {"Extended": [1.0, 2.0, 3.0, 4.0]}
    assert record["arcs"]["Weighted"] == [[0, 1, 1.0], [1, 2, 2.0], [2, 3, 3.0]]


def test_convert_command_with_config(chain_file, tmp_path, capsys):
    cfg = tmp_path / "transcode.yml"
    cfg.write_text("arc_style: simple\n")
    before = config.get_default_config()

    assert cli.main(["--config", str(cfg), "convert", str(chain_file), "--yaml"]) == 0

    out = capsys.readouterr().out
    assert "Simple:" in out
    # The CLI must not leak its config into the process default
    assert config.get_default_config() == before


def test_yaml_input(tmp_path, capsys):
    path = tmp_path / "graph.yaml"
    path.write_text(
        "gtype: Undirect\n"
        "nodes:\n"
        "  Compact: {count: 3, weights: []}\n"
        "arcs:\n"
        "  Simple: [[0, 1], [1, 2]]\n"
    )

    assert cli.main(["dot", str(path)]) == 0

    out = capsys.readouterr().out
    assert out.startswith("graph {")
    assert '\tn1 -- n2 [label="0.0"];' in out


def test_malformed_record_returns_error(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"gtype": "Direct", "nodes": {"Extended": [0]}, "arcs": {"Simple": [[0, 5]]}}))

    assert cli.main(["dot", str(path)]) == 1
    assert "[error]" in capsys.readouterr().err


def test_missing_input_file_returns_error(tmp_path, capsys):
    assert cli.main(["dot", str(tmp_path / "absent.json")]) == 1
    assert "[error]" in capsys.readouterr().err


def test_bad_config_returns_error(chain_file, tmp_path, capsys):
    cfg = tmp_path / "bad.yml"
    cfg.write_text("arc_style: curved\n")
    before = config.get_default_config()

    assert cli.main(["--config", str(cfg), "convert", str(chain_file)]) == 1
    assert "[error]" in capsys.readouterr().err
    assert config.get_default_config() == before
