"""Command group: manage Python interpreters."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from huak.commands._base import HuakGroup
from huak.commands._validators import python_version_callback

if TYPE_CHECKING:
    from huak.commands._context import AppContext


@click.group(
    cls=HuakGroup,
    examples="""\
  huak python list
  huak python use 3.12""",
)
def python() -> None:
    """Manage python installations."""


@python.command("list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List the installed Python interpreters."""
    app.emit(app.operations.list_python(app.base_config()))


@python.command()
@click.argument("version", callback=python_version_callback)
@click.pass_obj
def use(app: AppContext, version: str) -> None:
    """Use a specific Python interpreter (major.minor)."""
    app.emit(app.operations.use_python(version, app.base_config()))
