"""Tests for operation option records and the extend_args helper."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from huak.domain.options import (
    FormatOptions,
    LintOptions,
    OperationConfig,
    TerminalOptions,
    extend_args,
)
from huak.domain.types import Verbosity


class TestExtendArgs:
    def test_absent_without_extra(self) -> None:
        assert extend_args(None, []) == []

    def test_absent_with_extra(self) -> None:
        assert extend_args(None, ["--check"]) == ["--check"]

    def test_empty_with_extra(self) -> None:
        assert extend_args([], ["--check"]) == ["--check"]

    def test_present_with_extra_appends_after(self) -> None:
        assert extend_args(["-x", "--y"], ["--fix"]) == ["-x", "--y", "--fix"]

    def test_does_not_mutate_input(self) -> None:
        existing = ["-x"]
        result = extend_args(existing, ["--fix"])
        assert existing == ["-x"]
        assert result is not existing


class TestOperationConfig:
    def test_unrelated_options_absent(self, tmp_path: Path) -> None:
        config = OperationConfig(workspace_root=tmp_path)
        assert config.installer_options is None
        assert config.build_options is None
        assert config.clean_options is None
        assert config.format_options is None
        assert config.lint_options is None
        assert config.test_options is None
        assert config.publish_options is None
        assert config.workspace_options is None

    def test_default_verbosity_normal(self, tmp_path: Path) -> None:
        config = OperationConfig(workspace_root=tmp_path)
        assert config.terminal_options.verbosity is Verbosity.NORMAL
        assert config.quiet is False

    def test_quiet(self, tmp_path: Path) -> None:
        config = OperationConfig(
            workspace_root=tmp_path,
            terminal_options=TerminalOptions(verbosity=Verbosity.QUIET),
        )
        assert config.quiet is True

    def test_frozen(self, tmp_path: Path) -> None:
        config = OperationConfig(workspace_root=tmp_path)
        with pytest.raises(ValidationError):
            config.workspace_root = Path("/elsewhere")  # type: ignore[misc]


class TestOptionRecords:
    def test_args_absent_by_default(self) -> None:
        assert FormatOptions().args is None

    def test_empty_args_distinct_from_absent(self) -> None:
        assert FormatOptions(args=[]).args == []

    def test_lint_includes_types_by_default(self) -> None:
        assert LintOptions().include_types is True
