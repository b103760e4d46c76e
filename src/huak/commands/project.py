"""Commands: build, clean, fix, fmt, lint, test, publish, run, version, activate."""

from __future__ import annotations

import shlex
from typing import TYPE_CHECKING

import click

from huak.commands._base import HuakCommand, trailing_args

if TYPE_CHECKING:
    from huak.commands._context import AppContext


@click.command(cls=HuakCommand, trailing=True)
@click.pass_context
def build(ctx: click.Context) -> None:
    """Build tarball and wheel for the project."""
    from huak.services.compose import compose_build

    app: AppContext = ctx.obj
    app.emit(app.operations.build_project(compose_build(app.base_config(), trailing_args(ctx))))


@click.command(
    cls=HuakCommand,
    examples="""\
  huak clean
  huak clean --include-pyc --include-pycache""",
)
@click.option("--include-pyc", is_flag=True, help="Remove all .pyc files.")
@click.option("--include-pycache", is_flag=True, help="Remove all __pycache__ directories.")
@click.pass_obj
def clean(app: AppContext, include_pyc: bool, include_pycache: bool) -> None:
    """Remove tarball and wheel from the built project."""
    from huak.services.compose import compose_clean

    config = compose_clean(
        app.base_config(), include_pyc=include_pyc, include_pycache=include_pycache
    )
    app.emit(app.operations.clean_project(config))


@click.command(cls=HuakCommand, trailing=True)
@click.pass_context
def fix(ctx: click.Context) -> None:
    """Auto-fix fixable lint conflicts."""
    from huak.services.compose import compose_fix

    app: AppContext = ctx.obj
    app.emit(app.operations.lint_project(compose_fix(app.base_config(), trailing_args(ctx))))


@click.command(
    cls=HuakCommand,
    trailing=True,
    examples="""\
  huak fmt
  huak fmt --check
  huak fmt -- --line-length 100""",
)
@click.option("--check", is_flag=True, help="Check if Python code is formatted.")
@click.pass_context
def fmt(ctx: click.Context, check: bool) -> None:
    """Format the project's Python code."""
    from huak.services.compose import compose_format

    app: AppContext = ctx.obj
    config = compose_format(app.base_config(), trailing_args(ctx), check=check)
    app.emit(app.operations.format_project(config))


@click.command(
    cls=HuakCommand,
    trailing=True,
    examples="""\
  huak lint
  huak lint --fix
  huak lint --no-types -- --select E,F""",
)
@click.option("--fix", is_flag=True, help="Address any fixable lints.")
@click.option("--no-types", is_flag=True, help="Skip type-checking.")
@click.pass_context
def lint(ctx: click.Context, fix: bool, no_types: bool) -> None:
    """Lint the project's Python code."""
    from huak.services.compose import compose_lint

    app: AppContext = ctx.obj
    config = compose_lint(app.base_config(), trailing_args(ctx), fix=fix, no_types=no_types)
    app.emit(app.operations.lint_project(config))


@click.command(cls=HuakCommand, trailing=True)
@click.pass_context
def test(ctx: click.Context) -> None:
    """Test the project's Python code."""
    from huak.services.compose import compose_test

    app: AppContext = ctx.obj
    app.emit(app.operations.test_project(compose_test(app.base_config(), trailing_args(ctx))))


@click.command(cls=HuakCommand, trailing=True)
@click.pass_context
def publish(ctx: click.Context) -> None:
    """Builds and uploads current project to a registry."""
    from huak.services.compose import compose_publish

    app: AppContext = ctx.obj
    config = compose_publish(app.base_config(), trailing_args(ctx))
    app.emit(app.operations.publish_project(config))


@click.command(
    cls=HuakCommand,
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
    examples="""\
  huak run python -c "print('hi')"
  huak run pytest -x""",
)
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_obj
def run(app: AppContext, command: tuple[str, ...]) -> None:
    """Run a command within the project's environment context."""
    app.emit(app.operations.run_command_str(shlex.join(command), app.base_config()))


@click.command(cls=HuakCommand)
@click.pass_obj
def version(app: AppContext) -> None:
    """Display the version of the project."""
    app.emit(app.operations.display_project_version(app.base_config()))


@click.command(cls=HuakCommand)
@click.pass_obj
def activate(app: AppContext) -> None:
    """Activate the virtual environment."""
    app.emit(app.operations.activate_venv(app.base_config()))
