"""Filesystem capability used by the detector, the engine and the commands.

All paths handed to a ``FileSystem`` are POSIX-style and relative to the
project root, e.g. ``"src/app/api"``.  ``LocalFileSystem`` binds them to a
real directory; tests substitute an in-memory implementation.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Protocol

from nextkit.errors import InputError

logger = logging.getLogger(__name__)


def join(*parts: str) -> str:
    """Join root-relative path fragments, ignoring empty ones.

    ``join("", "hooks") == "hooks"`` and ``join("src", "app", "api") ==
    "src/app/api"``, so an empty base folder needs no special casing.
    """
    cleaned = [part.strip("/") for part in parts if part and part.strip("/")]
    if not cleaned:
        return ""
    return str(PurePosixPath(*cleaned))


def project_relative(raw: str, label: str) -> str:
    """Normalize a user-supplied path that must stay inside the project root.

    Raises:
        InputError: *raw* is absolute or contains a ``..`` segment.
    """
    path = PurePosixPath(raw.strip())
    if path.is_absolute() or ".." in path.parts:
        raise InputError(f"{label} must live inside the project: {raw}")
    return path.as_posix()


class FileSystem(Protocol):
    """Root-relative filesystem operations."""

    def exists(self, path: str) -> bool: ...

    def is_dir(self, path: str) -> bool: ...

    def is_file(self, path: str) -> bool: ...

    def make_dirs(self, path: str) -> None:
        """Create *path* and its parents; existing directories are fine."""
        ...

    def read_text(self, path: str) -> str: ...

    def write_text(self, path: str, content: str) -> None: ...

    def append_text(self, path: str, content: str) -> None: ...

    def list_dir(self, path: str) -> list[str]:
        """Return the sorted entry names directly under *path*."""
        ...


class LocalFileSystem:
    """``FileSystem`` backed by a real directory tree."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def resolve(self, path: str) -> Path:
        """Return the absolute location of a root-relative *path*."""
        return self.root / path if path else self.root

    def exists(self, path: str) -> bool:
        return self.resolve(path).exists()

    def is_dir(self, path: str) -> bool:
        return self.resolve(path).is_dir()

    def is_file(self, path: str) -> bool:
        return self.resolve(path).is_file()

    def make_dirs(self, path: str) -> None:
        logger.debug("mkdir -p %s", path)
        self.resolve(path).mkdir(parents=True, exist_ok=True)

    def read_text(self, path: str) -> str:
        return self.resolve(path).read_text(encoding="utf-8")

    def write_text(self, path: str, content: str) -> None:
        logger.debug("write %s (%d chars)", path, len(content))
        self.resolve(path).write_text(content, encoding="utf-8")

    def append_text(self, path: str, content: str) -> None:
        logger.debug("append %s (%d chars)", path, len(content))
        with self.resolve(path).open("a", encoding="utf-8") as handle:
            handle.write(content)

    def list_dir(self, path: str) -> list[str]:
        target = self.resolve(path)
        if not target.is_dir():
            return []
        return sorted(entry.name for entry in target.iterdir())
