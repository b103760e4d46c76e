"""CompletionService — install and uninstall shell completion for huak.

Three shell families, each with its own persistent artifact:

- bash (append): a fixed block appended to ``~/.bashrc``
- fish (per-user drop): ``~/.config/fish/completions/huak.fish``
- zsh (system drop): ``/usr/local/share/zsh/site-functions/_huak``

Install and uninstall are exact inverses. Elvish and PowerShell are
recognized but unimplemented and never touch the filesystem.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from huak.domain.types import CompletionAction, Shell
from huak.errors import ConfigurationError, HomeDirectoryError, HuakError, UnimplementedError
from huak.infrastructure.shell import (
    append_block,
    completion_script,
    remove_block,
    remove_script,
    write_script,
)
from huak.services.result import ServiceResult

if TYPE_CHECKING:
    import click

logger = logging.getLogger(__name__)

PROG_NAME = "huak"
DEFAULT_SHELL = Shell.BASH
ZSH_SITE_FUNCTIONS = Path("/usr/local/share/zsh/site-functions")

# Repeated installs append this block again; uninstall removes every copy.
BASH_BLOCK = f'\neval "$({PROG_NAME} completion)"\n'.encode()

_UNIMPLEMENTED = {
    Shell.ELVISH: "elvish completion",
    Shell.POWERSHELL: "powershell completion",
}


class CompletionService:
    """Shell integration manager.

    The home directory is injected rather than read from the process
    environment, so tests can point it at a temporary directory.
    """

    def __init__(
        self,
        cli: click.Command,
        *,
        home: Path | None,
        zsh_site_functions: Path = ZSH_SITE_FUNCTIONS,
    ) -> None:
        self._cli = cli
        self._home = home
        self._zsh_site_functions = zsh_site_functions

    # ------------------------------------------------------------------
    # Targets
    # ------------------------------------------------------------------

    def _require_home(self) -> Path:
        if self._home is None:
            raise HomeDirectoryError("HOME is not set")
        return self._home

    @property
    def bashrc(self) -> Path:
        return self._require_home() / ".bashrc"

    @property
    def fish_target(self) -> Path:
        return self._require_home() / ".config" / "fish" / "completions" / f"{PROG_NAME}.fish"

    @property
    def zsh_target(self) -> Path:
        return self._zsh_site_functions / f"_{PROG_NAME}"

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def script(self, shell: Shell = DEFAULT_SHELL) -> str:
        """Generated completion script for *shell*; no filesystem access."""
        if shell in _UNIMPLEMENTED:
            raise UnimplementedError(_UNIMPLEMENTED[shell])
        return completion_script(self._cli, shell.value, PROG_NAME)

    def generate(self, shell: Shell | None = None) -> ServiceResult:
        """Generate the script for *shell* (default bash) without touching files."""
        target = shell or DEFAULT_SHELL
        try:
            script = self.script(target)
        except HuakError as exc:
            return ServiceResult.from_exception("completion_print", exc)
        return ServiceResult(
            ok=True, op="completion_print", data={"shell": target.value, "script": script}
        )

    def run(self, action: CompletionAction, shell: Shell | None) -> ServiceResult:
        """Install or uninstall completion for *shell*.

        A missing shell is a configuration error reported before any
        filesystem access.
        """
        op = f"completion_{action.value}"
        try:
            if shell is None:
                raise ConfigurationError("no shell provided")
            if action is CompletionAction.INSTALL:
                path = self._install(shell)
            elif action is CompletionAction.UNINSTALL:
                path = self._uninstall(shell)
            else:
                raise ConfigurationError(f"{action.value} does not modify shell files")
        except (HuakError, OSError) as exc:
            logger.debug("Completion %s failed for %s", action.value, shell, exc_info=True)
            return ServiceResult.from_exception(op, exc)
        return ServiceResult(ok=True, op=op, data={"shell": shell.value, "path": str(path)})

    def _install(self, shell: Shell) -> Path:
        if shell in _UNIMPLEMENTED:
            raise UnimplementedError(_UNIMPLEMENTED[shell])
        if shell is Shell.BASH:
            target = self.bashrc
            append_block(target, BASH_BLOCK)
            return target
        target = self.fish_target if shell is Shell.FISH else self.zsh_target
        write_script(target, self.script(shell))
        return target

    def _uninstall(self, shell: Shell) -> Path:
        if shell in _UNIMPLEMENTED:
            raise UnimplementedError(_UNIMPLEMENTED[shell])
        if shell is Shell.BASH:
            target = self.bashrc
            remove_block(target, BASH_BLOCK)
            return target
        target = self.fish_target if shell is Shell.FISH else self.zsh_target
        remove_script(target)
        return target
