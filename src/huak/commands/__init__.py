"""Subcommand modules for huak.

Provides register_commands() which uses deferred imports to keep
``huak --help`` fast as the codebase grows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    1 group (python) + 18 standalone commands.
    """
    # --- Groups ---
    from huak.commands.python import python

    cli.add_command(python)

    # --- Standalone commands ---
    from huak.commands.completion import completion
    from huak.commands.dependencies import add, install, remove, update
    from huak.commands.project import (
        activate,
        build,
        clean,
        fix,
        fmt,
        lint,
        publish,
        run,
        test,
        version,
    )
    from huak.commands.workspace import init_cmd, new

    cli.add_command(activate)
    cli.add_command(add)
    cli.add_command(build)
    cli.add_command(completion)
    cli.add_command(clean)
    cli.add_command(fix)
    cli.add_command(fmt)
    cli.add_command(init_cmd)
    cli.add_command(install)
    cli.add_command(lint)
    cli.add_command(new)
    cli.add_command(publish)
    cli.add_command(remove)
    cli.add_command(run)
    cli.add_command(test)
    cli.add_command(update)
    cli.add_command(version)
