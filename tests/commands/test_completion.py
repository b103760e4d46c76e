"""Tests for the completion command."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from huak.cli import cli


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    (home / ".config" / "fish" / "completions").mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return home


class TestCompletionPrint:
    def test_prints_bash_script_by_default(self, cli_runner: CliRunner, home: Path) -> None:
        result = cli_runner.invoke(cli, ["completion"])
        assert result.exit_code == 0, result.output
        assert "_HUAK_COMPLETE" in result.stdout
        assert not (home / ".bashrc").exists()

    def test_prints_named_shell(self, cli_runner: CliRunner, home: Path) -> None:
        result = cli_runner.invoke(cli, ["completion", "--shell", "fish"])
        assert result.exit_code == 0, result.output
        assert "complete" in result.stdout
        assert "huak" in result.stdout

    def test_elvish_unimplemented(self, cli_runner: CliRunner, home: Path) -> None:
        result = cli_runner.invoke(cli, ["completion", "-s", "elvish"])
        assert result.exit_code == 1
        assert "elvish completion" in result.output


class TestCompletionInstall:
    def test_bash_install_and_uninstall(self, cli_runner: CliRunner, home: Path) -> None:
        bashrc = home / ".bashrc"
        bashrc.write_bytes(b"export PATH=/opt/bin:$PATH\n")

        result = cli_runner.invoke(cli, ["completion", "-s", "bash", "-i"])
        assert result.exit_code == 0, result.output
        assert bashrc.read_bytes() == (
            b'export PATH=/opt/bin:$PATH\n\neval "$(huak completion)"\n'
        )

        result = cli_runner.invoke(cli, ["completion", "-s", "bash", "-u"])
        assert result.exit_code == 0, result.output
        assert bashrc.read_bytes() == b"export PATH=/opt/bin:$PATH\n"

    def test_fish_install(self, cli_runner: CliRunner, home: Path) -> None:
        result = cli_runner.invoke(cli, ["completion", "--shell", "fish", "--install"])
        assert result.exit_code == 0, result.output
        target = home / ".config" / "fish" / "completions" / "huak.fish"
        assert target.is_file()
        assert "_HUAK_COMPLETE" in target.read_text()

    def test_install_without_shell_fails(self, cli_runner: CliRunner, home: Path) -> None:
        bashrc = home / ".bashrc"
        bashrc.write_bytes(b"# untouched\n")
        result = cli_runner.invoke(cli, ["completion", "-i"])
        assert result.exit_code == 1
        assert "no shell provided" in result.output
        assert bashrc.read_bytes() == b"# untouched\n"

    def test_powershell_install_touches_nothing(self, cli_runner: CliRunner, home: Path) -> None:
        result = cli_runner.invoke(cli, ["completion", "-s", "powershell", "-i"])
        assert result.exit_code == 1
        assert "powershell completion" in result.output
        assert [p for p in home.rglob("*") if p.is_file()] == []

    def test_unknown_shell_rejected(self, cli_runner: CliRunner, home: Path) -> None:
        result = cli_runner.invoke(cli, ["completion", "-s", "tcsh"])
        assert result.exit_code == 2

    def test_fish_install_without_completions_dir_fails(
        self, cli_runner: CliRunner, home: Path
    ) -> None:
        (home / ".config" / "fish" / "completions").rmdir()
        result = cli_runner.invoke(cli, ["completion", "-s", "fish", "-i"])
        assert result.exit_code == 1
        assert "No such file or directory" in result.output
        assert not (home / ".config" / "fish" / "completions").exists()

    def test_install_and_uninstall_conflict(self, cli_runner: CliRunner, home: Path) -> None:
        bashrc = home / ".bashrc"
        bashrc.write_bytes(b'x\neval "$(huak completion)"\n')
        result = cli_runner.invoke(cli, ["completion", "-s", "bash", "-i", "-u"])
        assert result.exit_code == 2
        assert "--install cannot be used with --uninstall" in result.output
        assert bashrc.read_bytes() == b'x\neval "$(huak completion)"\n'
