from pathlib import Path

import pytest

from routegraph.config import AppConfig, GraphConfig, get_config, reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults_point_at_bundled_matrix():
    config = AppConfig()

    assert config.graph.matrix_file == "graph.txt"
    assert config.graph.matrix_path == config.project_root / "data" / "graph.txt"
    assert config.graph.delimiter is None
    assert config.observability.level == "WARNING"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("ROUTEGRAPH_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("ROUTEGRAPH_GRAPH_MATRIX_FILE", "other.txt")
    monkeypatch.setenv("ROUTEGRAPH_GRAPH_DELIMITER", ",")

    config = GraphConfig()

    assert config.matrix_path == Path(tmp_path) / "other.txt"
    assert config.delimiter == ","


def test_get_config_is_cached_until_reset(monkeypatch):
    first = get_config()
    assert get_config() is first

    monkeypatch.setenv("ROUTEGRAPH_LOG_LEVEL", "DEBUG")
    reset_config()

    assert get_config() is not first
    assert get_config().observability.level == "DEBUG"
