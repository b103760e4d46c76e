"""Commands: add, remove, update, and install project dependencies.

Each routes to exactly one operation: the primary dependency set when no
group is given, the optional dependency group otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from huak.commands._base import HuakCommand, trailing_args
from huak.commands._validators import dependencies_callback

if TYPE_CHECKING:
    from huak.commands._context import AppContext


@click.command(
    cls=HuakCommand,
    trailing=True,
    examples="""\
  huak add requests
  huak add requests@2.28 click>=8
  huak add pytest --group dev
  huak add numpy -- --no-cache-dir""",
)
@click.argument("dependencies", nargs=-1, required=True, callback=dependencies_callback)
@click.option("--group", default=None, help="Adds an optional dependency group.")
@click.pass_context
def add(ctx: click.Context, dependencies: list[str], group: str | None) -> None:
    """Add dependencies to the project."""
    from huak.services.compose import compose_installer, dispatch_add

    app: AppContext = ctx.obj
    config = compose_installer(app.base_config(), trailing_args(ctx))
    app.emit(dispatch_add(app.operations, dependencies, group, config))


@click.command(
    cls=HuakCommand,
    trailing=True,
    examples="""\
  huak remove requests
  huak remove pytest --group dev""",
)
@click.argument("dependencies", nargs=-1, required=True)
@click.option("--group", default=None, help="Remove from optional dependency group.")
@click.pass_context
def remove(ctx: click.Context, dependencies: tuple[str, ...], group: str | None) -> None:
    """Remove dependencies from the project."""
    from huak.services.compose import compose_installer, dispatch_remove

    app: AppContext = ctx.obj
    config = compose_installer(app.base_config(), trailing_args(ctx))
    app.emit(dispatch_remove(app.operations, list(dependencies), group, config))


@click.command(
    cls=HuakCommand,
    trailing=True,
    examples="""\
  huak update
  huak update requests click
  huak update --group dev""",
)
@click.argument("dependencies", nargs=-1)
@click.option("--group", default=None, help="Update an optional dependency group.")
@click.pass_context
def update(ctx: click.Context, dependencies: tuple[str, ...], group: str | None) -> None:
    """Update the project's dependencies."""
    from huak.services.compose import compose_installer, dispatch_update

    app: AppContext = ctx.obj
    config = compose_installer(app.base_config(), trailing_args(ctx))
    app.emit(dispatch_update(app.operations, list(dependencies) or None, group, config))


@click.command(
    cls=HuakCommand,
    trailing=True,
    examples="""\
  huak install
  huak install --groups dev --groups docs
  huak install -- --no-deps""",
)
@click.option(
    "--groups",
    multiple=True,
    help="Install optional dependency groups (repeatable, comma-separated).",
)
@click.pass_context
def install(ctx: click.Context, groups: tuple[str, ...]) -> None:
    """Install the dependencies of an existing project."""
    from huak.services.compose import compose_installer, dispatch_install

    app: AppContext = ctx.obj
    names = [g.strip() for value in groups for g in value.split(",") if g.strip()]
    config = compose_installer(app.base_config(), trailing_args(ctx))
    app.emit(dispatch_install(app.operations, names or None, config))
