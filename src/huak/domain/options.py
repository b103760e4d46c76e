"""Pydantic models describing one huak invocation.

Every option record is frozen. Fields of :class:`OperationConfig` that do
not belong to the active command stay ``None`` so operations can tell
"not requested" from "requested with empty settings".

``args`` follows the same rule: ``None`` means no trailing arguments were
given, ``[]`` means ``--`` was given with nothing after it.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, Field

from huak.domain.types import Verbosity


def extend_args(existing: list[str] | None, extra: Sequence[str]) -> list[str]:
    """Return a new list of *existing* arguments followed by *extra*.

    An absent list is treated as empty, so the result is always a list.
    Neither input is mutated.
    """
    return [*(existing or []), *extra]


class TerminalOptions(BaseModel):
    """Terminal behaviour shared by every operation."""

    model_config = {"frozen": True}

    verbosity: Verbosity = Verbosity.NORMAL


class InstallerOptions(BaseModel):
    """Options for add/install/remove/update."""

    model_config = {"frozen": True}

    args: list[str] | None = None


class BuildOptions(BaseModel):
    model_config = {"frozen": True}

    args: list[str] | None = None


class CleanOptions(BaseModel):
    model_config = {"frozen": True}

    include_pycache: bool = False
    include_compiled_bytecode: bool = False


class FormatOptions(BaseModel):
    model_config = {"frozen": True}

    args: list[str] | None = None


class LintOptions(BaseModel):
    """Options for lint and fix.

    ``include_types`` is structured rather than a synthetic argument
    because it selects a second tool, not a flag for the linter.
    """

    model_config = {"frozen": True}

    args: list[str] | None = None
    include_types: bool = True


class TestOptions(BaseModel):
    model_config = {"frozen": True}
    __test__: ClassVar[bool] = False

    args: list[str] | None = None


class PublishOptions(BaseModel):
    model_config = {"frozen": True}

    args: list[str] | None = None


class WorkspaceOptions(BaseModel):
    """Options for init and new."""

    model_config = {"frozen": True}

    uses_git: bool = True


class OperationConfig(BaseModel):
    """The aggregate request handed to exactly one operation.

    Built by :mod:`huak.services.compose` with ``model_copy(update=...)``;
    never mutated after construction.
    """

    model_config = {"frozen": True}

    workspace_root: Path = Field(default_factory=Path.cwd)
    terminal_options: TerminalOptions = Field(default_factory=TerminalOptions)
    installer_options: InstallerOptions | None = None
    build_options: BuildOptions | None = None
    clean_options: CleanOptions | None = None
    format_options: FormatOptions | None = None
    lint_options: LintOptions | None = None
    test_options: TestOptions | None = None
    publish_options: PublishOptions | None = None
    workspace_options: WorkspaceOptions | None = None

    @property
    def quiet(self) -> bool:
        return self.terminal_options.verbosity is Verbosity.QUIET
