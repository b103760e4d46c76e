"""Custom Click base classes with --examples and trailing-argument support.

``HuakCommand`` accepts two extra parameters:

* ``examples`` — when ``--examples`` is passed, the command prints usage
  examples and exits. This keeps ``--help`` concise.
* ``trailing`` — everything after a literal ``--`` is split off before
  Click parses the rest and stored on the context, retrievable with
  :func:`trailing_args`. ``None`` means no ``--`` was given.
"""

from __future__ import annotations

from typing import Any

import click

TRAILING_KEY = "huak.trailing"
TRAILING_SEPARATOR = "--"


def trailing_args(ctx: click.Context) -> list[str] | None:
    """Arguments given after ``--``, in order, or None if there was no ``--``."""
    args = ctx.meta.get(TRAILING_KEY)
    return list(args) if args is not None else None


def _apply_quiet(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Honor -q after the subcommand name as if it were given globally."""
    if not value:
        return
    from huak.commands._context import AppContext

    app = ctx.find_object(AppContext)
    if app is not None:
        app.enable_quiet()


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class HuakCommand(click.Command):
    """Click Command subclass that supports ``--examples`` and ``-- ARGS``."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        trailing: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.trailing = trailing
        self.params.append(
            click.Option(
                ["-q", "--quiet"],
                is_flag=True,
                expose_value=False,
                callback=_apply_quiet,
                help="Minimal output.",
            )
        )
        if examples:
            _add_examples_option(self, examples)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if self.trailing and TRAILING_SEPARATOR in args:
            idx = args.index(TRAILING_SEPARATOR)
            ctx.meta[TRAILING_KEY] = args[idx + 1 :]
            args = args[:idx]
        return super().parse_args(ctx, args)

    def collect_usage_pieces(self, ctx: click.Context) -> list[str]:
        pieces = super().collect_usage_pieces(ctx)
        if self.trailing:
            pieces.append("[-- ARGS]...")
        return pieces


class HuakGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = HuakCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = HuakCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
