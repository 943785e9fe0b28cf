"""CLI tests via click's CliRunner."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from minimize_access.cli import main


@pytest.fixture
def runner(restore_root_logging) -> CliRunner:
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "cli.toml"
    path.write_text(
        '[exposure]\nbacking_values = [3, 4, 5]\ndefault_strategy = "view"\n'
        '[observability]\nlog_level = "WARNING"\n'
    )
    return path


def _invoke(runner: CliRunner, config: Path, *args: str):
    return runner.invoke(main, ["--config", str(config), *args])


class TestCommands:
    def test_constant(self, runner, config_file):
        result = _invoke(runner, config_file, "constant")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "25"

    def test_hazard_prints_before_and_after(self, runner, config_file):
        result = _invoke(runner, config_file, "hazard")
        assert result.exit_code == 0, result.output
        assert result.output.split() == ["2", "6"]

    def test_hazard_is_repeatable(self, runner, config_file):
        _invoke(runner, config_file, "hazard")
        result = _invoke(runner, config_file, "hazard")
        assert result.output.split() == ["2", "6"]

    def test_show_default_is_view(self, runner, config_file):
        result = _invoke(runner, config_file, "show")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "UnmodifiableView: [3, 4, 5]"

    def test_show_copy(self, runner, config_file):
        result = _invoke(runner, config_file, "show", "--strategy", "copy")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "list: [3, 4, 5]"

    def test_show_rejects_unknown_strategy(self, runner, config_file):
        result = _invoke(runner, config_file, "show", "--strategy", "alias")
        assert result.exit_code != 0

    def test_compare(self, runner, config_file):
        result = _invoke(runner, config_file, "compare", "--index", "0", "--value", "9")
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["view: [9, 4, 5]", "copy: [3, 4, 5]"]

    def test_compare_bad_index(self, runner, config_file):
        result = _invoke(runner, config_file, "compare", "--index", "7")
        assert result.exit_code == 2
        assert "out of range" in result.output


class TestConfigErrors:
    def test_invalid_config_exits_nonzero(self, runner, tmp_path: Path):
        path = tmp_path / "bad.toml"
        path.write_text("[exposure]\nbacking_values = []\n")
        result = runner.invoke(main, ["--config", str(path), "constant"])
        assert result.exit_code == 1
        assert "at least one value" in result.output
