"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from huak.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from huak.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "display_project_version":
        return str(result.data.get("version", ""))
    return ""


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="huak.ok")
    op = Text(f"  {result.op}", style="huak.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="huak.key")
    if key in ("path", "venv"):
        v = Text(str(value), style="huak.path")
    elif key == "version":
        v = Text(str(value), style="huak.version")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="huak.error")
    op = Text(f"  {result.op}", style="huak.op")
    console.print(label, op, Text(" — "), msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_pythons(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print(Text("No Python interpreters found on PATH.", style="huak.warning"))
        return
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Version", style="huak.version")
    table.add_column("Path", style="huak.path")
    for idx, item in enumerate(items, start=1):
        table.add_row(str(idx), item["version"], item["path"])
    console.print(table)


def _render_version(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    name = result.data.get("name", "")
    version = result.data.get("version", "")
    console.print(Text(f"{name} ", style="bold"), Text(str(version), style="huak.version"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + data as key-value pairs.

    The tool command line is only shown in verbose mode.
    """
    _status_line(console, result)
    for key, value in result.data.items():
        if key == "command" and not verbose:
            continue
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "list_python": _render_pythons,
    "display_project_version": _render_version,
}
