"""Unit tests for benchmark settings resolution.

Tests cover:
- reading the "bench" section of config.json
- environment fallback and precedence
- integer coercion of string values
"""

import json

from collect.bench.runner import DEFAULT_ITERATIONS, DEFAULT_SIZE
from collect.bench.settings import BenchSettings, read_bench_section


def write_config(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data) if not isinstance(data, str) else data)
    return str(path)


class TestReadBenchSection:
    """Tests for read_bench_section()."""

    def test_missing_file(self, tmp_path):
        """Test a missing file yields an empty section."""
        assert read_bench_section(tmp_path / "nope.json") == {}

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON yields an empty section."""
        write_config(tmp_path, "{not json")
        assert read_bench_section(tmp_path / "config.json") == {}

    def test_non_object(self, tmp_path):
        """Test a top-level list or a scalar bench entry is ignored."""
        write_config(tmp_path, [1, 2])
        assert read_bench_section(tmp_path / "config.json") == {}

        write_config(tmp_path, {"bench": 3})
        assert read_bench_section(tmp_path / "config.json") == {}

    def test_bench_section(self, tmp_path):
        """Test the bench object is returned as-is."""
        write_config(tmp_path, {"bench": {"iterations": 5}, "other": {}})
        assert read_bench_section(tmp_path / "config.json") == {"iterations": 5}


class TestBenchSettings:
    """Tests for BenchSettings.load()."""

    def test_defaults(self, tmp_path):
        """Test built-in defaults apply with no file and no env."""
        settings = BenchSettings.load(str(tmp_path / "nope.json"), environ={})
        assert settings == BenchSettings(iterations=DEFAULT_ITERATIONS, size=DEFAULT_SIZE)

    def test_from_config(self, tmp_path):
        """Test values come from the bench section."""
        path = write_config(tmp_path, {"bench": {"iterations": 7, "size": 3}})
        assert BenchSettings.load(path, environ={}) == BenchSettings(iterations=7, size=3)

    def test_env_fallback_is_typed(self, tmp_path):
        """Test environment strings are converted to int."""
        settings = BenchSettings.load(str(tmp_path / "nope.json"), environ={"BENCH_SIZE": "16"})
        assert settings.size == 16
        assert settings.iterations == DEFAULT_ITERATIONS

    def test_config_wins_over_env(self, tmp_path):
        """Test config values take precedence over environment variables."""
        path = write_config(tmp_path, {"bench": {"size": 8}})
        settings = BenchSettings.load(path, environ={"BENCH_SIZE": "16", "BENCH_ITERATIONS": "9"})
        assert settings == BenchSettings(iterations=9, size=8)

    def test_invalid_values_fall_back(self, tmp_path):
        """Test non-integer values fall back to defaults."""
        path = write_config(tmp_path, {"bench": {"size": "big"}})
        settings = BenchSettings.load(path, environ={"BENCH_ITERATIONS": "lots"})
        assert settings == BenchSettings(iterations=DEFAULT_ITERATIONS, size=DEFAULT_SIZE)

    def test_reads_cwd_config_and_os_environ(self, tmp_path, monkeypatch):
        """Test the default path is config.json in the working directory."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BENCH_ITERATIONS", "12")
        write_config(tmp_path, {"bench": {"size": 32}})
        assert BenchSettings.load() == BenchSettings(iterations=12, size=32)
