"""Shared pytest fixtures and test helpers for huak tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from huak.domain.options import OperationConfig
from huak.services.result import ServiceResult


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_workspace_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's HUAK_WORKSPACE from leaking into discovery."""
    monkeypatch.delenv("HUAK_WORKSPACE", raising=False)


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    """Temporary project directory with an empty pyproject.toml."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "pyproject.toml").write_text('[project]\nname = "project"\nversion = "1.2.3"\n')
    return root


@pytest.fixture
def _isolated_workspace(workspace_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp workspace so discovery finds it.

    Use via ``@pytest.mark.usefixtures("_isolated_workspace")`` on command
    test classes.
    """
    monkeypatch.chdir(workspace_root)


# ---------------------------------------------------------------------------
# Recording operations backend
# ---------------------------------------------------------------------------


@dataclass
class Call:
    """One recorded operation call."""

    name: str
    args: tuple[Any, ...]

    @property
    def config(self) -> OperationConfig:
        """The OperationConfig is always the last positional argument."""
        config = self.args[-1]
        assert isinstance(config, OperationConfig)
        return config


@dataclass
class RecordingOperations:
    """Operations fake that records every call and reports success."""

    calls: list[Call] = field(default_factory=list)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)

        def record(*args: Any) -> ServiceResult:
            self.calls.append(Call(name, args))
            return ServiceResult(ok=True, op=name)

        return record

    @property
    def last(self) -> Call:
        assert self.calls, "no operation was dispatched"
        return self.calls[-1]


@pytest.fixture
def recorder(monkeypatch: pytest.MonkeyPatch) -> RecordingOperations:
    """Replace the default operations backend with a recorder."""
    ops = RecordingOperations()
    monkeypatch.setattr("huak.services.operations.ToolOperations", lambda: ops)
    return ops
