"""Command: generate, install, or uninstall shell completion."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from huak.commands._base import HuakCommand
from huak.commands._validators import exclusive_flag
from huak.domain.types import CompletionAction, Shell

if TYPE_CHECKING:
    from huak.commands._context import AppContext


@click.command(
    cls=HuakCommand,
    examples="""\
  huak completion
  huak completion --shell fish --install
  huak completion -s bash -u""",
)
@click.option(
    "-s",
    "--shell",
    type=click.Choice([s.value for s in Shell]),
    default=None,
    help="Target shell.",
)
@click.option(
    "-i",
    "--install",
    is_flag=True,
    help="Install the completion script in your shell init file (requires --shell).",
)
@click.option(
    "-u",
    "--uninstall",
    is_flag=True,
    help="Uninstall the completion script from your shell init file (requires --shell).",
)
@click.pass_context
def completion(ctx: click.Context, shell: str | None, install: bool, uninstall: bool) -> None:
    """Generates a shell completion script for supported shells.

    Without --install or --uninstall the script is printed to stdout
    (bash unless --shell names another shell).
    """
    from huak.services.completion import CompletionService

    app: AppContext = ctx.obj
    svc = CompletionService(ctx.find_root().command, home=app.settings.home)
    action = exclusive_flag(ctx, install=install, uninstall=uninstall)
    resolved = CompletionAction(action) if action else CompletionAction.PRINT
    target = Shell(shell) if shell else None
    if resolved is CompletionAction.PRINT:
        result = svc.generate(target)
        if not result.ok:
            app.emit(result)
        click.echo(result.data["script"], nl=False)
        return
    app.emit(svc.run(resolved, target))
