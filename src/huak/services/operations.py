"""Operation execution — one entry point per huak sub-operation.

:class:`Operations` is the contract the CLI dispatches to. Each method
receives the composed :class:`OperationConfig` and returns a
:class:`ServiceResult`.

:class:`ToolOperations` is the default implementation. It delegates to the
conventional tools (pip, build, ruff, mypy, pytest, twine, venv, git) as
subprocesses in the workspace root, appending trailing arguments verbatim.
It performs no dependency resolution and never edits project manifests.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
import sys
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from huak.services.result import ServiceResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from huak.domain.options import OperationConfig

logger = logging.getLogger(__name__)

VENV_DIRNAME = ".venv"
_PYTHON_NAME = re.compile(r"^python(\d+\.\d+)$")

_PYPROJECT_TEMPLATE = """\
[project]
name = "{name}"
version = "0.0.1"
description = ""
dependencies = []
{scripts}
[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"
"""

_SCRIPTS_TEMPLATE = """
[project.scripts]
{name} = "{package}.main:main"
"""

_MAIN_TEMPLATE = """\
def main():
    print("Hello, World!")


if __name__ == "__main__":
    main()
"""


class Operations(Protocol):
    """Entry points invoked with a composed OperationConfig."""

    def activate_venv(self, config: OperationConfig) -> ServiceResult: ...

    def add_project_dependencies(
        self, dependencies: list[str], config: OperationConfig
    ) -> ServiceResult: ...

    def add_project_optional_dependencies(
        self, dependencies: list[str], group: str, config: OperationConfig
    ) -> ServiceResult: ...

    def build_project(self, config: OperationConfig) -> ServiceResult: ...

    def clean_project(self, config: OperationConfig) -> ServiceResult: ...

    def format_project(self, config: OperationConfig) -> ServiceResult: ...

    def lint_project(self, config: OperationConfig) -> ServiceResult: ...

    def init_app_project(self, config: OperationConfig) -> ServiceResult: ...

    def init_lib_project(self, config: OperationConfig) -> ServiceResult: ...

    def install_project_dependencies(self, config: OperationConfig) -> ServiceResult: ...

    def install_project_optional_dependencies(
        self, groups: list[str], config: OperationConfig
    ) -> ServiceResult: ...

    def new_app_project(self, config: OperationConfig) -> ServiceResult: ...

    def new_lib_project(self, config: OperationConfig) -> ServiceResult: ...

    def publish_project(self, config: OperationConfig) -> ServiceResult: ...

    def list_python(self, config: OperationConfig) -> ServiceResult: ...

    def use_python(self, version: str, config: OperationConfig) -> ServiceResult: ...

    def remove_project_dependencies(
        self, dependencies: list[str], config: OperationConfig
    ) -> ServiceResult: ...

    def remove_project_optional_dependencies(
        self, dependencies: list[str], group: str, config: OperationConfig
    ) -> ServiceResult: ...

    def run_command_str(self, command: str, config: OperationConfig) -> ServiceResult: ...

    def test_project(self, config: OperationConfig) -> ServiceResult: ...

    def update_project_dependencies(
        self, dependencies: list[str] | None, config: OperationConfig
    ) -> ServiceResult: ...

    def update_project_optional_dependencies(
        self, dependencies: list[str] | None, group: str, config: OperationConfig
    ) -> ServiceResult: ...

    def display_project_version(self, config: OperationConfig) -> ServiceResult: ...


def _args(options: object | None) -> list[str]:
    """Trailing args of an option record, or [] when absent."""
    return list(getattr(options, "args", None) or [])


def _package_name(root: Path) -> str:
    return root.resolve().name.replace("-", "_").lower()


def _in_venv(path: Path, root: Path) -> bool:
    return VENV_DIRNAME in path.relative_to(root).parts


class ToolOperations:
    """Run each operation through the standard Python tooling."""

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _venv(self, config: OperationConfig) -> Path:
        return config.workspace_root / VENV_DIRNAME

    def _python(self, config: OperationConfig) -> str:
        """The workspace venv interpreter if there is one, else the current one."""
        bindir = "Scripts" if os.name == "nt" else "bin"
        candidate = self._venv(config) / bindir / "python"
        return str(candidate) if candidate.exists() else sys.executable

    def _env(self, config: OperationConfig) -> dict[str, str]:
        env = dict(os.environ)
        venv = self._venv(config)
        if venv.is_dir():
            bindir = venv / ("Scripts" if os.name == "nt" else "bin")
            env["VIRTUAL_ENV"] = str(venv)
            env["PATH"] = os.pathsep.join([str(bindir), env.get("PATH", "")])
        return env

    def _run(
        self,
        op: str,
        argv: Sequence[str],
        config: OperationConfig,
        *,
        data: dict[str, object] | None = None,
    ) -> ServiceResult:
        """Run *argv* in the workspace root and wrap the outcome."""
        logger.debug("Running %s", " ".join(argv))
        try:
            proc = subprocess.run(
                list(argv),
                cwd=config.workspace_root,
                env=self._env(config),
                capture_output=config.quiet,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            return ServiceResult.failure(op, "TOOL_NOT_FOUND", f"{argv[0]} not found: {exc}")
        if proc.returncode != 0:
            return ServiceResult.failure(
                op,
                "COMMAND_FAILED",
                f"{argv[0]} exited with status {proc.returncode}",
                {"command": list(argv), "returncode": proc.returncode},
            )
        return ServiceResult(ok=True, op=op, data={"command": list(argv), **(data or {})})

    def _pip(self, config: OperationConfig, *args: str) -> list[str]:
        return [self._python(config), "-m", "pip", *args, *_args(config.installer_options)]

    # ------------------------------------------------------------------
    # Environment
    # ------------------------------------------------------------------

    def activate_venv(self, config: OperationConfig) -> ServiceResult:
        """Spawn the user's shell with the workspace venv activated."""
        op = "activate_venv"
        if not self._venv(config).is_dir():
            return ServiceResult.failure(
                op, "VENV_NOT_FOUND", f"no {VENV_DIRNAME} in {config.workspace_root}"
            )
        shell = os.environ.get("SHELL", "/bin/sh")
        return self._run(op, [shell], config, data={"venv": str(self._venv(config))})

    def list_python(self, config: OperationConfig) -> ServiceResult:
        """List ``pythonX.Y`` interpreters found on PATH, newest first."""
        found: dict[str, str] = {}
        for directory in os.environ.get("PATH", "").split(os.pathsep):
            path = Path(directory)
            if not path.is_dir():
                continue
            for entry in path.iterdir():
                match = _PYTHON_NAME.match(entry.name)
                if match and os.access(entry, os.X_OK):
                    found.setdefault(match.group(1), str(entry))
        items = [
            {"version": v, "path": found[v]}
            for v in sorted(found, key=lambda s: tuple(int(p) for p in s.split(".")), reverse=True)
        ]
        return ServiceResult(ok=True, op="list_python", data={"count": len(items), "items": items})

    def use_python(self, version: str, config: OperationConfig) -> ServiceResult:
        """Create the workspace venv with the ``python<version>`` interpreter."""
        op = "use_python"
        interpreter = shutil.which(f"python{version}")
        if interpreter is None:
            return ServiceResult.failure(
                op, "PYTHON_NOT_FOUND", f"python{version} was not found on PATH"
            )
        venv = self._venv(config)
        if venv.exists():
            shutil.rmtree(venv)
        return self._run(
            op,
            [interpreter, "-m", "venv", str(venv)],
            config,
            data={"version": version, "venv": str(venv)},
        )

    def run_command_str(self, command: str, config: OperationConfig) -> ServiceResult:
        op = "run_command"
        logger.debug("Running shell command %r", command)
        proc = subprocess.run(
            command,
            shell=True,
            cwd=config.workspace_root,
            env=self._env(config),
            check=False,
        )
        if proc.returncode != 0:
            return ServiceResult.failure(
                op,
                "COMMAND_FAILED",
                f"command exited with status {proc.returncode}",
                {"command": command, "returncode": proc.returncode},
            )
        return ServiceResult(ok=True, op=op, data={"command": command})

    # ------------------------------------------------------------------
    # Dependencies
    # ------------------------------------------------------------------

    def install_project_dependencies(self, config: OperationConfig) -> ServiceResult:
        return self._run(
            "install_project_dependencies", self._pip(config, "install", "-e", "."), config
        )

    def install_project_optional_dependencies(
        self, groups: list[str], config: OperationConfig
    ) -> ServiceResult:
        target = f".[{','.join(groups)}]"
        return self._run(
            "install_project_optional_dependencies",
            self._pip(config, "install", "-e", target),
            config,
            data={"groups": groups},
        )

    def add_project_dependencies(
        self, dependencies: list[str], config: OperationConfig
    ) -> ServiceResult:
        return self._run(
            "add_project_dependencies",
            self._pip(config, "install", *dependencies),
            config,
            data={"dependencies": dependencies},
        )

    def add_project_optional_dependencies(
        self, dependencies: list[str], group: str, config: OperationConfig
    ) -> ServiceResult:
        return self._run(
            "add_project_optional_dependencies",
            self._pip(config, "install", *dependencies),
            config,
            data={"dependencies": dependencies, "group": group},
        )

    def remove_project_dependencies(
        self, dependencies: list[str], config: OperationConfig
    ) -> ServiceResult:
        return self._run(
            "remove_project_dependencies",
            self._pip(config, "uninstall", "-y", *dependencies),
            config,
            data={"dependencies": dependencies},
        )

    def remove_project_optional_dependencies(
        self, dependencies: list[str], group: str, config: OperationConfig
    ) -> ServiceResult:
        return self._run(
            "remove_project_optional_dependencies",
            self._pip(config, "uninstall", "-y", *dependencies),
            config,
            data={"dependencies": dependencies, "group": group},
        )

    def update_project_dependencies(
        self, dependencies: list[str] | None, config: OperationConfig
    ) -> ServiceResult:
        targets = dependencies or ["-e", "."]
        return self._run(
            "update_project_dependencies",
            self._pip(config, "install", "--upgrade", *targets),
            config,
            data={"dependencies": dependencies},
        )

    def update_project_optional_dependencies(
        self, dependencies: list[str] | None, group: str, config: OperationConfig
    ) -> ServiceResult:
        targets = dependencies or ["-e", f".[{group}]"]
        return self._run(
            "update_project_optional_dependencies",
            self._pip(config, "install", "--upgrade", *targets),
            config,
            data={"dependencies": dependencies, "group": group},
        )

    # ------------------------------------------------------------------
    # Tooling
    # ------------------------------------------------------------------

    def build_project(self, config: OperationConfig) -> ServiceResult:
        argv = [self._python(config), "-m", "build", *_args(config.build_options)]
        return self._run("build_project", argv, config)

    def format_project(self, config: OperationConfig) -> ServiceResult:
        argv = [self._python(config), "-m", "ruff", "format", *_args(config.format_options)]
        return self._run("format_project", argv, config)

    def lint_project(self, config: OperationConfig) -> ServiceResult:
        """Run ruff, then mypy when type-checking is included."""
        op = "lint_project"
        options = config.lint_options
        python = self._python(config)
        result = self._run(op, [python, "-m", "ruff", "check", *_args(options)], config)
        if not result.ok or options is None or not options.include_types:
            return result
        return self._run(op, [python, "-m", "mypy", "."], config)

    def test_project(self, config: OperationConfig) -> ServiceResult:
        argv = [self._python(config), "-m", "pytest", *_args(config.test_options)]
        return self._run("test_project", argv, config)

    def publish_project(self, config: OperationConfig) -> ServiceResult:
        argv = [self._python(config), "-m", "twine", "upload", "dist/*"]
        argv.extend(_args(config.publish_options))
        return self._run("publish_project", argv, config)

    def clean_project(self, config: OperationConfig) -> ServiceResult:
        """Remove ``dist/`` contents and, optionally, compiled bytecode."""
        root = config.workspace_root
        options = config.clean_options
        removed: list[str] = []
        dist = root / "dist"
        if dist.is_dir():
            for entry in dist.iterdir():
                if entry.is_dir():
                    shutil.rmtree(entry)
                else:
                    entry.unlink()
                removed.append(str(entry.relative_to(root)))
        if options is not None and options.include_compiled_bytecode:
            for pyc in root.rglob("*.pyc"):
                if pyc.is_file() and not _in_venv(pyc, root):
                    pyc.unlink()
                    removed.append(str(pyc.relative_to(root)))
        if options is not None and options.include_pycache:
            for cache in sorted(root.rglob("__pycache__"), reverse=True):
                if cache.is_dir() and not _in_venv(cache, root):
                    shutil.rmtree(cache)
                    removed.append(str(cache.relative_to(root)))
        return ServiceResult(
            ok=True, op="clean_project", data={"count": len(removed), "removed": removed}
        )

    def display_project_version(self, config: OperationConfig) -> ServiceResult:
        op = "display_project_version"
        pyproject = config.workspace_root / "pyproject.toml"
        try:
            data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return ServiceResult.failure(op, "NOT_FOUND", f"no pyproject.toml in {pyproject.parent}")
        except tomllib.TOMLDecodeError as exc:
            return ServiceResult.failure(op, "INVALID_TOML", f"Invalid TOML in {pyproject}: {exc}")
        project = data.get("project", {})
        if "version" not in project:
            return ServiceResult.failure(op, "NO_VERSION", "project version is not set")
        return ServiceResult(
            ok=True,
            op=op,
            data={"name": project.get("name", ""), "version": project["version"]},
        )

    # ------------------------------------------------------------------
    # Workspaces
    # ------------------------------------------------------------------

    def init_app_project(self, config: OperationConfig) -> ServiceResult:
        return self._init("init_app_project", config, app=True)

    def init_lib_project(self, config: OperationConfig) -> ServiceResult:
        return self._init("init_lib_project", config, app=False)

    def new_app_project(self, config: OperationConfig) -> ServiceResult:
        return self._new("new_app_project", config, app=True)

    def new_lib_project(self, config: OperationConfig) -> ServiceResult:
        return self._new("new_lib_project", config, app=False)

    def _new(self, op: str, config: OperationConfig, *, app: bool) -> ServiceResult:
        root = config.workspace_root
        if root.is_file():
            return ServiceResult.failure(op, "PROJECT_EXISTS", f"{root} is a file")
        if root.exists() and any(root.iterdir()):
            return ServiceResult.failure(op, "PROJECT_EXISTS", f"{root} is not empty")
        root.mkdir(parents=True, exist_ok=True)
        package = root / "src" / _package_name(root)
        package.mkdir(parents=True)
        (package / "__init__.py").write_text('__version__ = "0.0.1"\n', encoding="utf-8")
        if app:
            (package / "main.py").write_text(_MAIN_TEMPLATE, encoding="utf-8")
        tests = root / "tests"
        tests.mkdir()
        (tests / "__init__.py").write_text("", encoding="utf-8")
        return self._init(op, config, app=app)

    def _init(self, op: str, config: OperationConfig, *, app: bool) -> ServiceResult:
        """Write a minimal pyproject.toml and optionally ``git init``."""
        root = config.workspace_root
        pyproject = root / "pyproject.toml"
        if pyproject.exists():
            return ServiceResult.failure(op, "PROJECT_EXISTS", f"{pyproject} already exists")
        name = root.resolve().name
        scripts = _SCRIPTS_TEMPLATE.format(name=name, package=_package_name(root)) if app else ""
        pyproject.write_text(
            _PYPROJECT_TEMPLATE.format(name=name, scripts=scripts), encoding="utf-8"
        )
        data: dict[str, object] = {"path": str(root), "name": name}
        options = config.workspace_options
        if options is not None and options.uses_git and not (root / ".git").exists():
            return self._run(op, ["git", "init"], config, data=data)
        return ServiceResult(ok=True, op=op, data=data)
