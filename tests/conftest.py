"""Shared pytest fixtures for the nextkit test suite.

Provides reusable fakes and fixtures for:
- An in-memory ``FileSystem`` with Next.js project layouts
- A scripted ``Prompter`` that replays canned answers
- A recording ``CommandRunner`` that never spawns processes
- A ``CommandContext`` factory wiring the fakes together
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from pathlib import Path, PurePosixPath
from typing import Any, Callable

import pytest

from nextkit.commands import CommandContext
from nextkit.config import Config
from nextkit.installer import CommandResult, PackageInstaller


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class MemoryFileSystem:
    """In-memory ``FileSystem``; the root directory always exists."""

    def __init__(self) -> None:
        self.dirs: set[str] = {""}
        self.files: dict[str, str] = {}

    @staticmethod
    def _parent(path: str) -> str:
        parent = str(PurePosixPath(path).parent)
        return "" if parent == "." else parent

    def exists(self, path: str) -> bool:
        return path in self.dirs or path in self.files

    def is_dir(self, path: str) -> bool:
        return path in self.dirs

    def is_file(self, path: str) -> bool:
        return path in self.files

    def make_dirs(self, path: str) -> None:
        if path in self.files:
            raise FileExistsError(path)
        current = PurePosixPath(path)
        while str(current) not in ("", "."):
            self.dirs.add(str(current))
            current = current.parent

    def read_text(self, path: str) -> str:
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]

    def write_text(self, path: str, content: str) -> None:
        if self._parent(path) not in self.dirs:
            raise FileNotFoundError(path)
        self.files[path] = content

    def append_text(self, path: str, content: str) -> None:
        if self._parent(path) not in self.dirs:
            raise FileNotFoundError(path)
        self.files[path] = self.files.get(path, "") + content

    def list_dir(self, path: str) -> list[str]:
        names = {
            PurePosixPath(entry).name
            for entry in (*self.dirs, *self.files)
            if entry and self._parent(entry) == path
        }
        return sorted(names)

    # -- test helpers --------------------------------------------------------

    def add_file(self, path: str, content: str = "") -> None:
        parent = self._parent(path)
        if parent:
            self.make_dirs(parent)
        self.files[path] = content

    def snapshot(self) -> tuple[frozenset[str], dict[str, str]]:
        return frozenset(self.dirs), dict(self.files)


class ScriptedPrompter:
    """``Prompter`` that replays queued answers, then falls back to defaults."""

    def __init__(self, answers: Sequence[Any] = ()) -> None:
        self.answers: deque[Any] = deque(answers)
        self.questions: list[str] = []

    def _next(self, message: str, default: Any) -> Any:
        self.questions.append(message)
        if self.answers:
            return self.answers.popleft()
        return default

    def ask_confirm(self, message: str, default: bool = True) -> bool:
        return bool(self._next(message, default))

    def ask_text(self, message: str, default: str = "") -> str:
        return str(self._next(message, default))

    def ask_choice(self, message: str, choices: Sequence[str], default: str | None = None) -> str:
        answer = self._next(message, default if default is not None else choices[0])
        assert answer in choices, f"{answer!r} not in {choices!r}"
        return answer


class RecordingRunner:
    """``CommandRunner`` that records invocations and returns a fixed code."""

    def __init__(self, returncode: int = 0, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.calls: list[tuple[list[str], Path]] = []

    def run(self, args: Sequence[str], cwd: Path) -> CommandResult:
        self.calls.append((list(args), cwd))
        return CommandResult(args=list(args), returncode=self.returncode, stderr=self.stderr)


# ---------------------------------------------------------------------------
# Filesystem fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """Empty in-memory filesystem."""
    return MemoryFileSystem()


@pytest.fixture
def app_project() -> MemoryFileSystem:
    """Next.js project using the App Router, no ``src/``."""
    fs = MemoryFileSystem()
    fs.add_file("package.json", '{"name": "demo"}\n')
    fs.make_dirs("app")
    return fs


@pytest.fixture
def pages_project() -> MemoryFileSystem:
    """Next.js project using the Pages Router, no ``src/``."""
    fs = MemoryFileSystem()
    fs.add_file("package.json", '{"name": "demo"}\n')
    fs.make_dirs("pages")
    return fs


@pytest.fixture
def src_app_project() -> MemoryFileSystem:
    """App Router project nested under ``src/``."""
    fs = MemoryFileSystem()
    fs.add_file("package.json", '{"name": "demo"}\n')
    fs.make_dirs("src/app")
    return fs


@pytest.fixture
def local_app_project(tmp_path: Path) -> Path:
    """Real App Router project directory on disk."""
    root = tmp_path / "next-app"
    (root / "app").mkdir(parents=True)
    (root / "package.json").write_text('{"name": "demo"}\n', encoding="utf-8")
    return root


@pytest.fixture
def local_pages_project(tmp_path: Path) -> Path:
    """Real Pages Router project nested under ``src/`` on disk."""
    root = tmp_path / "next-pages-app"
    (root / "src" / "pages").mkdir(parents=True)
    (root / "package.json").write_text('{"name": "demo"}\n', encoding="utf-8")
    return root


# ---------------------------------------------------------------------------
# Capability fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def runner() -> RecordingRunner:
    """Command runner that always succeeds."""
    return RecordingRunner()


@pytest.fixture
def failing_runner() -> RecordingRunner:
    """Command runner whose every command exits with status 1."""
    return RecordingRunner(returncode=1, stderr="npm ERR! network unreachable")


@pytest.fixture
def make_ctx(runner: RecordingRunner) -> Callable[..., CommandContext]:
    """Factory building a ``CommandContext`` around fakes.

    Usage::

        ctx = make_ctx(app_project, answers=[True, "user, product"])
    """

    def _make(
        fs: Any,
        answers: Sequence[Any] = (),
        *,
        command_runner: RecordingRunner | None = None,
        skip_install: bool = False,
        package_manager: str | None = None,
    ) -> CommandContext:
        root = Path("/project")
        config = Config(root_dir=root, skip_install=skip_install, package_manager=package_manager)
        installer = PackageInstaller(
            fs=fs,
            runner=command_runner or runner,
            root_dir=root,
            package_manager=package_manager,
        )
        return CommandContext(
            config=config,
            fs=fs,
            prompter=ScriptedPrompter(answers),
            installer=installer,
        )

    return _make
