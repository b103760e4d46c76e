"""Tests for build, clean, fix, fmt, lint, test, publish, run, version, activate."""

from __future__ import annotations

import json
import shlex
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from huak.cli import cli
from huak.domain.types import Verbosity
from huak.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from tests.conftest import RecordingOperations


@pytest.mark.usefixtures("_isolated_workspace")
class TestFmt:
    def test_check_without_trailing(
        self, cli_runner: CliRunner, recorder: RecordingOperations
    ) -> None:
        result = cli_runner.invoke(cli, ["fmt", "--check"])
        assert result.exit_code == 0, result.output
        assert recorder.last.name == "format_project"
        options = recorder.last.config.format_options
        assert options is not None
        assert options.args == ["--check"]

    def test_check_after_trailing(
        self, cli_runner: CliRunner, recorder: RecordingOperations
    ) -> None:
        result = cli_runner.invoke(cli, ["fmt", "--check", "--", "-x"])
        assert result.exit_code == 0, result.output
        options = recorder.last.config.format_options
        assert options is not None
        assert options.args == ["-x", "--check"]

    def test_no_check(self, cli_runner: CliRunner, recorder: RecordingOperations) -> None:
        cli_runner.invoke(cli, ["fmt"])
        options = recorder.last.config.format_options
        assert options is not None
        assert options.args is None


@pytest.mark.usefixtures("_isolated_workspace")
class TestLintAndFix:
    def test_fix_appends_flag(self, cli_runner: CliRunner, recorder: RecordingOperations) -> None:
        result = cli_runner.invoke(cli, ["fix", "--", "--select", "E"])
        assert result.exit_code == 0, result.output
        assert recorder.last.name == "lint_project"
        options = recorder.last.config.lint_options
        assert options is not None
        assert options.args == ["--select", "E", "--fix"]
        assert options.include_types is False

    def test_fix_without_trailing(
        self, cli_runner: CliRunner, recorder: RecordingOperations
    ) -> None:
        cli_runner.invoke(cli, ["fix"])
        options = recorder.last.config.lint_options
        assert options is not None
        assert options.args == ["--fix"]

    def test_lint_defaults(self, cli_runner: CliRunner, recorder: RecordingOperations) -> None:
        cli_runner.invoke(cli, ["lint"])
        options = recorder.last.config.lint_options
        assert options is not None
        assert options.args is None
        assert options.include_types is True

    def test_lint_flags(self, cli_runner: CliRunner, recorder: RecordingOperations) -> None:
        result = cli_runner.invoke(cli, ["lint", "--fix", "--no-types", "--", "--select", "F"])
        assert result.exit_code == 0, result.output
        options = recorder.last.config.lint_options
        assert options is not None
        assert options.args == ["--select", "F", "--fix"]
        assert options.include_types is False


@pytest.mark.usefixtures("_isolated_workspace")
class TestPassthroughCommands:
    @pytest.mark.parametrize(
        ("command", "op", "field"),
        [
            ("build", "build_project", "build_options"),
            ("test", "test_project", "test_options"),
            ("publish", "publish_project", "publish_options"),
        ],
    )
    def test_trailing_args(
        self,
        cli_runner: CliRunner,
        recorder: RecordingOperations,
        command: str,
        op: str,
        field: str,
    ) -> None:
        result = cli_runner.invoke(cli, [command, "--", "-k", "slow", "-k", "slow"])
        assert result.exit_code == 0, result.output
        assert recorder.last.name == op
        assert getattr(recorder.last.config, field).args == ["-k", "slow", "-k", "slow"]

    def test_empty_trailing_is_empty_list(
        self, cli_runner: CliRunner, recorder: RecordingOperations
    ) -> None:
        cli_runner.invoke(cli, ["test", "--"])
        options = recorder.last.config.test_options
        assert options is not None
        assert options.args == []

    def test_clean_flags(self, cli_runner: CliRunner, recorder: RecordingOperations) -> None:
        result = cli_runner.invoke(cli, ["clean", "--include-pyc", "--include-pycache"])
        assert result.exit_code == 0, result.output
        options = recorder.last.config.clean_options
        assert options is not None
        assert options.include_compiled_bytecode is True
        assert options.include_pycache is True

    def test_run_joins_command(self, cli_runner: CliRunner, recorder: RecordingOperations) -> None:
        result = cli_runner.invoke(cli, ["run", "pytest", "-q", "--maxfail", "1"])
        assert result.exit_code == 0, result.output
        assert recorder.last.name == "run_command_str"
        assert recorder.last.args[0] == "pytest -q --maxfail 1"

    def test_run_keeps_argument_quoting(
        self, cli_runner: CliRunner, recorder: RecordingOperations
    ) -> None:
        result = cli_runner.invoke(cli, ["run", "python", "-c", "print('hi there')"])
        assert result.exit_code == 0, result.output
        assert recorder.last.args[0] == "python -c 'print('\"'\"'hi there'\"'\"')'"
        assert shlex.split(recorder.last.args[0]) == ["python", "-c", "print('hi there')"]

    @pytest.mark.parametrize(
        ("command", "op"),
        [("version", "display_project_version"), ("activate", "activate_venv")],
    )
    def test_plain_commands(
        self, cli_runner: CliRunner, recorder: RecordingOperations, command: str, op: str
    ) -> None:
        result = cli_runner.invoke(cli, [command])
        assert result.exit_code == 0, result.output
        assert recorder.last.name == op


@pytest.mark.usefixtures("_isolated_workspace")
class TestConfiguration:
    def test_workspace_root_discovered(
        self,
        cli_runner: CliRunner,
        recorder: RecordingOperations,
        workspace_root: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        nested = workspace_root / "src" / "pkg"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        cli_runner.invoke(cli, ["build"])
        assert recorder.last.config.workspace_root == workspace_root.resolve()

    def test_normal_verbosity(self, cli_runner: CliRunner, recorder: RecordingOperations) -> None:
        cli_runner.invoke(cli, ["build"])
        assert recorder.last.config.terminal_options.verbosity is Verbosity.NORMAL

    @pytest.mark.parametrize("args", [["-q", "build"], ["build", "-q"], ["build", "--quiet"]])
    def test_quiet_anywhere(
        self, cli_runner: CliRunner, recorder: RecordingOperations, args: list[str]
    ) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        assert recorder.last.config.terminal_options.verbosity is Verbosity.QUIET

    def test_quiet_after_separator_is_trailing(
        self, cli_runner: CliRunner, recorder: RecordingOperations
    ) -> None:
        cli_runner.invoke(cli, ["test", "--", "-q"])
        config = recorder.last.config
        assert config.terminal_options.verbosity is Verbosity.NORMAL
        assert config.test_options is not None
        assert config.test_options.args == ["-q"]


@pytest.mark.usefixtures("_isolated_workspace")
class TestEmit:
    def test_failure_exits_nonzero(
        self,
        cli_runner: CliRunner,
        recorder: RecordingOperations,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        failed = ServiceResult(
            ok=False,
            op="build_project",
            error=ServiceError(code="COMMAND_FAILED", message="build exited with status 1"),
        )
        monkeypatch.setattr(
            type(recorder), "build_project", lambda self, config: failed, raising=False
        )
        result = cli_runner.invoke(cli, ["build"])
        assert result.exit_code == 1
        assert "build exited with status 1" in result.output

    def test_json_output(self, cli_runner: CliRunner, recorder: RecordingOperations) -> None:
        result = cli_runner.invoke(cli, ["--json", "build"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "build_project"
