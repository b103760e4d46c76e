"""Filesystem primitives for shell completion integration.

Append-style files are edited as bytes so removing a block restores the
previous content exactly, line endings included. Every function opens,
reads or writes, and closes its file within the call.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click
from click.shell_completion import get_completion_class

logger = logging.getLogger(__name__)


def completion_script(cli: click.Command, shell: str, prog_name: str) -> str:
    """Generate the completion script click provides for *shell*.

    Raises:
        ValueError: click has no completion support for *shell*.
    """
    comp_cls = get_completion_class(shell)
    if comp_cls is None:
        msg = f"No completion support for {shell}"
        raise ValueError(msg)
    complete_var = f"_{prog_name.replace('-', '_').upper()}_COMPLETE"
    return comp_cls(cli, {}, prog_name, complete_var).source()


def append_block(path: Path, block: bytes) -> None:
    """Append *block* to an existing file; a missing file is an error."""
    with path.open("r+b") as fh:
        fh.seek(0, os.SEEK_END)
        fh.write(block)
    logger.debug("Appended %d bytes to %s", len(block), path)


def remove_block(path: Path, block: bytes) -> int:
    """Remove every occurrence of *block* from *path* and rewrite it.

    The file is rewritten even when nothing matched. Returns the number
    of occurrences removed.
    """
    content = path.read_bytes()
    count = content.count(block)
    path.write_bytes(content.replace(block, b""))
    logger.debug("Removed %d block(s) from %s", count, path)
    return count


def write_script(path: Path, script: str) -> None:
    """Create or truncate *path* with *script*. The parent must exist."""
    path.write_text(script, encoding="utf-8")
    logger.debug("Wrote completion script to %s", path)


def remove_script(path: Path) -> None:
    """Delete *path*; a missing file propagates ``FileNotFoundError``."""
    path.unlink()
    logger.debug("Deleted completion script %s", path)
