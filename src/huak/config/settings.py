"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``HUAK_*`` prefix (plus ``HOME`` for the home directory)
  3. Code defaults

``workspace_root`` is not read from the environment directly; it is
resolved by :func:`HuakSettings.from_cli` through walk-up discovery.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from huak.config.discovery import find_workspace


class HuakSettings(BaseSettings):
    """Unified settings for the entire huak CLI.

    Stored on the :class:`~huak.commands._context.AppContext` created by
    the root group, frozen after construction.

    Attributes:
        workspace_root: Nearest directory holding ``pyproject.toml``,
            or CWD if none was found.
        home: The user's home directory, from ``HOME``. Only completion
            install/uninstall for per-user shells needs it.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "HUAK_",
        "populate_by_name": True,
    }

    workspace_root: Path = Field(default_factory=Path.cwd)
    home: Path | None = Field(default=None, validation_alias=AliasChoices("home", "HOME"))

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Only CLI flags and the environment feed settings."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(
        cls,
        *,
        workspace_root: Path | None = None,
        **cli_flags: Any,
    ) -> HuakSettings:
        """Construct settings from a CLI invocation.

        Discovers the workspace via walk-up from CWD unless
        *workspace_root* is given, and merges CLI flags as
        highest-priority overrides.
        """
        resolved_root = workspace_root or find_workspace() or Path.cwd()
        return cls(workspace_root=resolved_root, **cli_flags)
