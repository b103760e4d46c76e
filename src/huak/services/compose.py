"""Configuration composer — turns parsed command input into an OperationConfig.

Every ``compose_*`` function is pure: it takes the base configuration and
returns a new frozen copy with exactly the option record the command
needs. Trailing arguments are passed through verbatim and in order;
synthetic flags are only ever appended after them.

The ``dispatch_*`` helpers route dependency-mutating commands to exactly
one collaborator entry point: the primary dependency set when no group is
given, the optional dependency group otherwise.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from huak.domain.options import (
    BuildOptions,
    CleanOptions,
    FormatOptions,
    InstallerOptions,
    LintOptions,
    OperationConfig,
    PublishOptions,
    TerminalOptions,
    TestOptions,
    WorkspaceOptions,
    extend_args,
)
from huak.domain.types import ProjectTemplate, Verbosity

if TYPE_CHECKING:
    from huak.config.settings import HuakSettings
    from huak.services.operations import Operations
    from huak.services.result import ServiceResult

logger = logging.getLogger(__name__)

FIX_FLAG = "--fix"
CHECK_FLAG = "--check"


def base_config(settings: HuakSettings) -> OperationConfig:
    """Starting configuration: discovered workspace root and verbosity."""
    verbosity = Verbosity.QUIET if settings.quiet else Verbosity.NORMAL
    return OperationConfig(
        workspace_root=settings.workspace_root,
        terminal_options=TerminalOptions(verbosity=verbosity),
    )


# ── Trailing-argument passthrough ─────────────────────────────────────


def compose_installer(config: OperationConfig, trailing: list[str] | None) -> OperationConfig:
    return config.model_copy(update={"installer_options": InstallerOptions(args=trailing)})


def compose_build(config: OperationConfig, trailing: list[str] | None) -> OperationConfig:
    return config.model_copy(update={"build_options": BuildOptions(args=trailing)})


def compose_publish(config: OperationConfig, trailing: list[str] | None) -> OperationConfig:
    return config.model_copy(update={"publish_options": PublishOptions(args=trailing)})


def compose_test(config: OperationConfig, trailing: list[str] | None) -> OperationConfig:
    return config.model_copy(update={"test_options": TestOptions(args=trailing)})


def compose_clean(
    config: OperationConfig, *, include_pyc: bool, include_pycache: bool
) -> OperationConfig:
    options = CleanOptions(
        include_pycache=include_pycache,
        include_compiled_bytecode=include_pyc,
    )
    return config.model_copy(update={"clean_options": options})


# ── Cumulative-flag commands ──────────────────────────────────────────


def compose_fix(config: OperationConfig, trailing: list[str] | None) -> OperationConfig:
    """Lint with the fix flag always appended and type-checking off."""
    options = LintOptions(args=extend_args(trailing, [FIX_FLAG]), include_types=False)
    return config.model_copy(update={"lint_options": options})


def compose_lint(
    config: OperationConfig,
    trailing: list[str] | None,
    *,
    fix: bool,
    no_types: bool,
) -> OperationConfig:
    """Lint options; ``--fix`` is appended after trailing args when requested."""
    args = extend_args(trailing, [FIX_FLAG]) if fix else trailing
    options = LintOptions(args=args, include_types=not no_types)
    return config.model_copy(update={"lint_options": options})


def compose_format(
    config: OperationConfig, trailing: list[str] | None, *, check: bool
) -> OperationConfig:
    """Format options; ``--check`` is appended once when a check is requested.

    With no trailing args a check yields exactly ``["--check"]``.
    """
    args = trailing
    if check:
        extra = [] if trailing and CHECK_FLAG in trailing else [CHECK_FLAG]
        args = extend_args(trailing, extra)
    return config.model_copy(update={"format_options": FormatOptions(args=args)})


# ── Workspace root overrides ──────────────────────────────────────────


def compose_init(config: OperationConfig, *, cwd: Path, no_vcs: bool) -> OperationConfig:
    """``init`` always targets the current working directory."""
    return config.model_copy(
        update={
            "workspace_root": cwd,
            "workspace_options": WorkspaceOptions(uses_git=not no_vcs),
        }
    )


def compose_new(config: OperationConfig, *, path: str, no_vcs: bool) -> OperationConfig:
    """``new`` always targets the user-supplied path."""
    return config.model_copy(
        update={
            "workspace_root": Path(path),
            "workspace_options": WorkspaceOptions(uses_git=not no_vcs),
        }
    )


# ── Target selection ──────────────────────────────────────────────────


def dispatch_add(
    ops: Operations, dependencies: list[str], group: str | None, config: OperationConfig
) -> ServiceResult:
    if group is not None:
        logger.debug("Adding %d dependencies to group %s", len(dependencies), group)
        return ops.add_project_optional_dependencies(dependencies, group, config)
    return ops.add_project_dependencies(dependencies, config)


def dispatch_remove(
    ops: Operations, dependencies: list[str], group: str | None, config: OperationConfig
) -> ServiceResult:
    if group is not None:
        return ops.remove_project_optional_dependencies(dependencies, group, config)
    return ops.remove_project_dependencies(dependencies, config)


def dispatch_update(
    ops: Operations,
    dependencies: list[str] | None,
    group: str | None,
    config: OperationConfig,
) -> ServiceResult:
    if group is not None:
        return ops.update_project_optional_dependencies(dependencies, group, config)
    return ops.update_project_dependencies(dependencies, config)


def dispatch_install(
    ops: Operations, groups: list[str] | None, config: OperationConfig
) -> ServiceResult:
    if groups:
        return ops.install_project_optional_dependencies(groups, config)
    return ops.install_project_dependencies(config)


def dispatch_init(
    ops: Operations, template: ProjectTemplate, config: OperationConfig
) -> ServiceResult:
    if template is ProjectTemplate.APP:
        return ops.init_app_project(config)
    return ops.init_lib_project(config)


def dispatch_new(
    ops: Operations, template: ProjectTemplate, config: OperationConfig
) -> ServiceResult:
    if template is ProjectTemplate.APP:
        return ops.new_app_project(config)
    return ops.new_lib_project(config)
