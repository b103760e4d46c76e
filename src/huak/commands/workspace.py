"""Commands: init and new.

``init`` always targets the current working directory and ``new`` the
path given by the user, never the discovered workspace.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import click

from huak.commands._base import HuakCommand
from huak.commands._validators import exclusive_flag
from huak.domain.types import ProjectTemplate

if TYPE_CHECKING:
    from huak.commands._context import AppContext

F = TypeVar("F")


def template_options(f: F) -> F:
    """``--app``/``--lib``; at most one may be given."""
    f = click.option("--lib", is_flag=True, help="Use a library template [default].")(f)
    return click.option("--app", is_flag=True, help="Use an application template.")(f)


def _template(ctx: click.Context, app: bool, lib: bool) -> ProjectTemplate:
    if exclusive_flag(ctx, app=app, lib=lib) == "app":
        return ProjectTemplate.APP
    return ProjectTemplate.LIB


@click.command(
    "init",
    cls=HuakCommand,
    examples="""\
  huak init
  huak init --app
  huak init --lib --no-vcs""",
)
@template_options
@click.option("--no-vcs", is_flag=True, help="Don't initialize VCS in the project.")
@click.pass_context
def init_cmd(ctx: click.Context, app: bool, lib: bool, no_vcs: bool) -> None:
    """Initialize the existing project."""
    from huak.services.compose import compose_init, dispatch_init

    template = _template(ctx, app, lib)
    obj: AppContext = ctx.obj
    config = compose_init(obj.base_config(), cwd=Path.cwd(), no_vcs=no_vcs)
    obj.emit(dispatch_init(obj.operations, template, config))


@click.command(
    cls=HuakCommand,
    examples="""\
  huak new my-project
  huak new tools/cli --app --no-vcs""",
)
@click.argument("path")
@template_options
@click.option("--no-vcs", is_flag=True, help="Don't initialize VCS in the new project.")
@click.pass_context
def new(ctx: click.Context, path: str, app: bool, lib: bool, no_vcs: bool) -> None:
    """Create a new project at <path>."""
    from huak.services.compose import compose_new, dispatch_new

    template = _template(ctx, app, lib)
    obj: AppContext = ctx.obj
    config = compose_new(obj.base_config(), path=path, no_vcs=no_vcs)
    obj.emit(dispatch_new(obj.operations, template, config))
