"""Dependency and Python version specifier normalization.

Both normalizers are pure: no I/O and no shared state. They run at
argument-parsing time, so a failure aborts the command before any
operation configuration is composed.
"""

from __future__ import annotations

from packaging.version import InvalidVersion, Version

from huak.errors import VersionGranularityError, VersionParseError

EXACT_COMPARATOR = "=="
MAX_RELEASE_SEGMENTS = 2


def normalize_dependency(raw: str) -> str:
    """Rewrite every ``@`` in *raw* to the exact-version comparator.

    ``requests@2.28`` becomes ``requests==2.28``. No other character is
    touched and nothing is validated; the installer rejects bad names.
    """
    return raw.replace("@", EXACT_COMPARATOR)


def normalize_python_version(raw: str) -> str:
    """Validate a major.minor interpreter version and return its canonical form.

    Raises:
        VersionParseError: *raw* is not a PEP 440 version.
        VersionGranularityError: *raw* has more than two release segments.
    """
    try:
        version = Version(raw)
    except InvalidVersion as exc:
        raise VersionParseError(raw) from exc
    if len(version.release) > MAX_RELEASE_SEGMENTS:
        raise VersionGranularityError(raw)
    return str(version)
