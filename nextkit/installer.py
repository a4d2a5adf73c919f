"""Package-manager invocation.

``PackageInstaller`` picks the project's package manager from its lock file
and runs the install through a ``CommandRunner``.  The runner returns a
structured ``CommandResult`` instead of raising, so callers decide how to
report a failed install.  Calls block until the child process exits; there is
no timeout.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from nextkit.config import PackageManager
from nextkit.fs import FileSystem

logger = logging.getLogger(__name__)

# Lock file -> package manager, checked in order.
LOCK_FILES: tuple[tuple[str, PackageManager], ...] = (
    ("yarn.lock", "yarn"),
    ("pnpm-lock.yaml", "pnpm"),
)

INSTALL_COMMANDS: dict[str, list[str]] = {
    "npm": ["npm", "install"],
    "yarn": ["yarn", "add"],
    "pnpm": ["pnpm", "add"],
}


@dataclass
class CommandResult:
    """Outcome of one external command."""

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Combined stdout/stderr, stripped."""
        return "\n".join(part for part in (self.stdout.strip(), self.stderr.strip()) if part)


class CommandRunner(Protocol):
    def run(self, args: Sequence[str], cwd: Path) -> CommandResult: ...


class SubprocessRunner:
    """``CommandRunner`` that spawns real processes."""

    def run(self, args: Sequence[str], cwd: Path) -> CommandResult:
        logger.debug("exec %s (cwd=%s)", " ".join(args), cwd)
        try:
            completed = subprocess.run(
                list(args),
                cwd=str(cwd),
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            return CommandResult(args=list(args), returncode=127, stderr=str(exc))
        return CommandResult(
            args=list(args),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )


@dataclass
class PackageInstaller:
    """Installs npm dependencies into the project at *root_dir*."""

    fs: FileSystem
    runner: CommandRunner
    root_dir: Path
    package_manager: PackageManager | None = None
    history: list[CommandResult] = field(default_factory=list)

    def detect_manager(self) -> PackageManager:
        """Return the forced manager, else the one whose lock file exists, else npm."""
        if self.package_manager:
            return self.package_manager
        for lock_file, manager in LOCK_FILES:
            if self.fs.is_file(lock_file):
                return manager
        return "npm"

    def build_command(self, packages: Sequence[str], dev: bool = False) -> list[str]:
        args = list(INSTALL_COMMANDS[self.detect_manager()])
        if dev:
            args.append("-D")
        args.extend(packages)
        return args

    def install(self, packages: Sequence[str], dev: bool = False) -> CommandResult:
        """Install *packages*, blocking until the package manager exits."""
        args = self.build_command(packages, dev=dev)
        result = self.runner.run(args, self.root_dir)
        if not result.success:
            logger.debug("install failed (%d): %s", result.returncode, result.output)
        self.history.append(result)
        return result
