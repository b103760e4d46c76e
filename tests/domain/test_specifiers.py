"""Tests for dependency and Python version specifier normalization."""

import pytest

from huak.domain.specifiers import normalize_dependency, normalize_python_version
from huak.errors import HuakError, VersionGranularityError, VersionParseError


class TestNormalizeDependency:
    def test_rewrites_at_to_exact_comparator(self) -> None:
        assert normalize_dependency("requests@2.28") == "requests==2.28"

    def test_rewrites_every_at(self) -> None:
        assert normalize_dependency("a@1@2") == "a==1==2"

    @pytest.mark.parametrize("raw", ["requests", "click>=8", "  spaced  ", "", "numpy==1.26"])
    def test_passes_through_without_at(self, raw: str) -> None:
        assert normalize_dependency(raw) == raw

    def test_no_trimming_or_validation(self) -> None:
        assert normalize_dependency(" not a@name ") == " not a==name "

    def test_idempotent(self) -> None:
        once = normalize_dependency("pkg@1.0")
        assert normalize_dependency(once) == once
        assert "@" not in once


class TestNormalizePythonVersion:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("3", "3"),
            ("3.12", "3.12"),
            ("3.10", "3.10"),
            ("03.09", "3.9"),
            ("v3.11", "3.11"),
            ("3.13rc1", "3.13rc1"),
            ("3.13-rc.1", "3.13rc1"),
        ],
    )
    def test_canonical_form(self, raw: str, expected: str) -> None:
        assert normalize_python_version(raw) == expected

    @pytest.mark.parametrize("raw", ["3.10.4", "3.12.0", "1.2.3.4"])
    def test_patch_level_rejected(self, raw: str) -> None:
        with pytest.raises(VersionGranularityError) as exc_info:
            normalize_python_version(raw)
        assert exc_info.value.token == raw
        assert str(exc_info.value) == f"{raw} is invalid, use major.minor"

    @pytest.mark.parametrize("raw", ["abc", "", "3.x", "latest"])
    def test_unparseable_rejected(self, raw: str) -> None:
        with pytest.raises(VersionParseError) as exc_info:
            normalize_python_version(raw)
        assert exc_info.value.token == raw

    def test_errors_are_huak_errors(self) -> None:
        with pytest.raises(HuakError):
            normalize_python_version("3.10.4")
