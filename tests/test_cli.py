"""End-to-end tests for the command surface."""

from pathlib import Path

import pytest

from routegraph.cli import build_parser, main
from routegraph.config import reset_config


DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def run(capsys, *argv):
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_prints_weight_and_route(capsys):
    code, out, _ = run(capsys, "-file", str(DATA_DIR / "four_nodes.txt"), "-from", "0", "-to", "2")

    assert code == 0
    assert out.splitlines() == ["weight: 7", "route: 0 2"]


def test_prints_no_way_when_unreachable(capsys):
    code, out, _ = run(capsys, "-file", str(DATA_DIR / "four_nodes.txt"), "-from", "2", "-to", "0")

    assert code == 0
    assert out.strip() == "no way"


def test_print_flag_dumps_graph_first(capsys):
    code, out, _ = run(
        capsys, "-file", str(DATA_DIR / "four_nodes.txt"), "-from", "1", "-to", "2", "-print"
    )

    lines = out.splitlines()
    assert code == 0
    assert lines[0] == "> Number of nodes: 4"
    assert lines[-2:] == ["weight: 9", "route: 1 0 2"]


def test_file_defaults_to_configured_path(capsys, monkeypatch):
    monkeypatch.setenv("ROUTEGRAPH_GRAPH_DATA_DIR", str(DATA_DIR))
    monkeypatch.setenv("ROUTEGRAPH_GRAPH_MATRIX_FILE", "chain.txt")

    code, out, _ = run(capsys, "-from", "0", "-to", "4")

    assert code == 0
    assert out.splitlines() == ["weight: 7", "route: 0 1 2 3 4"]


@pytest.mark.parametrize(
    "filename, message",
    [
        ("not_square.txt", "not square"),
        ("malformed.txt", "Failed to load graph"),
        ("negative.txt", "Negative weight"),
        ("missing.txt", "Failed to load graph"),
    ],
)
def test_bad_input_file_exits_non_zero(capsys, filename, message):
    code, out, err = run(capsys, "-file", str(DATA_DIR / filename), "-from", "0", "-to", "2")

    assert code == 1
    assert out == ""
    assert message in err


def test_unknown_key_exits_non_zero(capsys):
    code, _, err = run(capsys, "-file", str(DATA_DIR / "four_nodes.txt"), "-from", "0", "-to", "9")

    assert code == 1
    assert "No such key" in err


@pytest.mark.parametrize(
    "argv",
    [
        ["-file", "graph.txt", "-from", "0"],
        ["-file", "graph.txt", "-from", "zero", "-to", "1"],
        ["-file", "graph.txt", "-fr", "0", "-to", "1"],
        ["-fil", "graph.txt", "-from", "0", "-to", "1"],
        ["-file", "graph.txt", "-from", "0", "-t", "1"],
        ["-file", "graph.txt", "-from", "0", "-to", "1", "extra"],
    ],
)
def test_malformed_arguments_are_rejected(argv):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(argv)

    assert excinfo.value.code == 2


def test_full_flags_and_negative_keys_are_accepted():
    args = build_parser().parse_args(["-file", "graph.txt", "-from", "-1", "-to", "2", "-print"])

    assert args.file == Path("graph.txt")
    assert (args.source, args.destination) == (-1, 2)
    assert args.show_graph is True
