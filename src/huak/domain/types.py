"""Tagged variants resolved once at the command-line boundary.

Mutually exclusive flags (``--app``/``--lib``, ``--install``/``--uninstall``)
collapse into one of these enums in the click layer so downstream code
never sees competing booleans.
"""

from __future__ import annotations

from enum import StrEnum


class Verbosity(StrEnum):
    """Terminal verbosity handed to operations."""

    QUIET = "quiet"
    NORMAL = "normal"


class ProjectTemplate(StrEnum):
    """Project skeleton used by ``init`` and ``new``."""

    APP = "app"
    LIB = "lib"


class CompletionAction(StrEnum):
    """What ``huak completion`` should do."""

    PRINT = "print"
    INSTALL = "install"
    UNINSTALL = "uninstall"


class Shell(StrEnum):
    """Shell families huak recognizes for completion."""

    BASH = "bash"
    ELVISH = "elvish"
    FISH = "fish"
    POWERSHELL = "powershell"
    ZSH = "zsh"
