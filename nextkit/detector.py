"""Project setup detection.

Classifies a Next.js project by probing its directory tree: whether a nested
``src/`` folder is used and which routing convention is present.  Detection is
read-only and works against any ``FileSystem``.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

from nextkit.errors import ConfigurationError
from nextkit.fs import FileSystem, join

logger = logging.getLogger(__name__)

SOURCE_DIR = "src"
MANIFEST_FILE = "package.json"


class RoutingConvention(str, Enum):
    """The two Next.js routing layouts."""

    APP_ROUTER = "App Router"
    PAGES_ROUTER = "Pages Router"

    @property
    def marker_dir(self) -> str:
        """Directory whose presence identifies the convention."""
        return "app" if self is RoutingConvention.APP_ROUTER else "pages"


# When both marker directories exist the first entry wins.
DETECTION_PRIORITY: tuple[RoutingConvention, ...] = (
    RoutingConvention.APP_ROUTER,
    RoutingConvention.PAGES_ROUTER,
)


class ProjectSetup(BaseModel):
    """Detected layout of the target project."""

    model_config = ConfigDict(frozen=True)

    routing_convention: RoutingConvention
    uses_source_dir: bool = False

    @property
    def source_root(self) -> str:
        """``"src"`` when the nested source directory is used, else ``""``."""
        return SOURCE_DIR if self.uses_source_dir else ""

    @property
    def is_app_router(self) -> bool:
        return self.routing_convention is RoutingConvention.APP_ROUTER


def has_source_dir(fs: FileSystem) -> bool:
    """Return ``True`` when a ``src/`` directory sits directly under the root."""
    return fs.is_dir(SOURCE_DIR)


def require_manifest(fs: FileSystem) -> None:
    """Raise ``ConfigurationError`` unless the root holds a ``package.json``."""
    if not fs.is_file(MANIFEST_FILE):
        raise ConfigurationError("No package.json found. Are you in a Next.js project?")


def detect(fs: FileSystem) -> ProjectSetup:
    """Detect the routing convention and ``src/`` usage of the project.

    Marker directories are looked up under ``src/`` when it exists, otherwise
    under the root.  If both ``app`` and ``pages`` exist the App Router is
    selected (see ``DETECTION_PRIORITY``).

    Raises:
        ConfigurationError: neither marker directory exists.
    """
    uses_source_dir = has_source_dir(fs)
    base = SOURCE_DIR if uses_source_dir else ""

    for convention in DETECTION_PRIORITY:
        if fs.is_dir(join(base, convention.marker_dir)):
            logger.debug("detected %s (src=%s)", convention.value, uses_source_dir)
            return ProjectSetup(routing_convention=convention, uses_source_dir=uses_source_dir)

    raise ConfigurationError(
        "Neither App Router nor Pages Router found. "
        "Ensure your Next.js project has an `app` or `pages` directory."
    )
