"""Workspace discovery.

Walk-up finder locates the nearest ``pyproject.toml``, similar to how git
finds .git/. Supports a ``HUAK_WORKSPACE`` env var override.
"""

from __future__ import annotations

import os
from pathlib import Path

WORKSPACE_MARKER = "pyproject.toml"
WORKSPACE_ENV_VAR = "HUAK_WORKSPACE"


def find_workspace(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for a workspace root.

    Returns the directory holding ``pyproject.toml``, or None if not found.
    Checks HUAK_WORKSPACE env var first.
    """
    env_path = os.environ.get(WORKSPACE_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_dir():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        if (current / WORKSPACE_MARKER).is_file():
            return current
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None
