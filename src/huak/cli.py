"""The ``huak`` entry point.

Global flags are read once here into :class:`HuakSettings`; each
subcommand receives them through the shared :class:`AppContext`.
"""

from __future__ import annotations

import click

from huak import __version__
from huak.commands import register_commands
from huak.commands._base import HuakGroup
from huak.commands._context import AppContext
from huak.config.settings import HuakSettings


@click.group(
    cls=HuakGroup,
    invoke_without_command=True,
    examples="""\
  huak new my-project --app
  huak add requests@2.28 --group web
  huak -q test -- -x""",
)
@click.version_option(version=__version__, prog_name="huak")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and detailed results.")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("--log-json", is_flag=True, help="Write log records to stderr as JSON.")
@click.pass_context
def cli(ctx: click.Context, **flags: bool) -> None:
    """A Python package manager inspired by Cargo."""
    ctx.obj = AppContext(HuakSettings.from_cli(**flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
