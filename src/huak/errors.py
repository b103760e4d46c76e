"""Exception hierarchy for huak.

Domain code raises these; the service layer converts them into failed
:class:`~huak.services.result.ServiceResult` objects using ``code``.
Filesystem failures are left as the builtin ``OSError`` subclasses.
"""

from __future__ import annotations


class HuakError(Exception):
    """Base class for every error huak raises on purpose."""

    code = "HUAK_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class VersionParseError(HuakError, ValueError):
    """The token does not conform to the Python version scheme."""

    code = "VERSION_PARSE_ERROR"

    def __init__(self, token: str) -> None:
        super().__init__(f"failed to parse version: {token}")
        self.token = token


class VersionGranularityError(HuakError, ValueError):
    """The token is a valid version but encodes more than major.minor."""

    code = "VERSION_GRANULARITY_ERROR"

    def __init__(self, token: str) -> None:
        super().__init__(f"{token} is invalid, use major.minor")
        self.token = token


class ConfigurationError(HuakError):
    """A required flag combination is missing or invalid."""

    code = "CONFIGURATION_ERROR"


class UnimplementedError(HuakError):
    """A recognized feature that huak does not support yet."""

    code = "UNIMPLEMENTED"


class HomeDirectoryError(HuakError):
    """The user's home directory could not be resolved (``HOME`` unset)."""

    code = "IO_ERROR"
