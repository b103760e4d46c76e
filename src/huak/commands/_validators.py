"""Click callbacks backed by the specifier normalizers.

Normalization happens while Click processes arguments, so a bad version
aborts the command with a usage error before anything is composed.
"""

from __future__ import annotations

import click

from huak.domain.specifiers import normalize_dependency, normalize_python_version
from huak.errors import VersionGranularityError, VersionParseError


def dependencies_callback(
    _ctx: click.Context, _param: click.Parameter, value: tuple[str, ...]
) -> list[str]:
    """Rewrite ``name@1.0`` to ``name==1.0`` for every dependency, in order."""
    return [normalize_dependency(dep) for dep in value]


def python_version_callback(_ctx: click.Context, _param: click.Parameter, value: str) -> str:
    """Accept a ``major.minor`` interpreter version."""
    try:
        return normalize_python_version(value)
    except (VersionParseError, VersionGranularityError) as exc:
        raise click.BadParameter(exc.message) from exc


def exclusive_flag(ctx: click.Context, **flags: bool) -> str | None:
    """Name of the single flag that is set, or None when none is.

    Raises:
        click.UsageError: more than one of *flags* is set.
    """
    selected = [name for name, value in flags.items() if value]
    if len(selected) > 1:
        first, second = (f"--{name.replace('_', '-')}" for name in selected[:2])
        raise click.UsageError(f"{first} cannot be used with {second}", ctx)
    return selected[0] if selected else None
