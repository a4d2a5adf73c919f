"""nextkit configuration.

Process-level inputs (working directory, environment variables, CLI flags)
are collected once into a typed ``Config`` and passed explicitly to the
detector, the scaffolding engine and the command handlers.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

PackageManager = Literal["npm", "yarn", "pnpm"]

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global nextkit configuration.

    Instances are created by the CLI entry point (``Config.from_env`` merged
    with command-line flags) and handed to every command handler.
    """

    root_dir: Path = Field(default_factory=Path.cwd, description="Project root to scaffold into")
    package_manager: PackageManager | None = Field(
        default=None,
        description="Force a package manager instead of detecting it from lock files",
    )
    skip_install: bool = Field(default=False, description="Never run the package manager")
    assume_yes: bool = Field(default=False, description="Accept every prompt default")
    verbose: bool = Field(default=False, description="Enable debug logging")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def manifest_path(self) -> Path:
        """Path to the project's ``package.json``."""
        return self.root_dir / "package.json"

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            NEXTKIT_ROOT, NEXTKIT_PACKAGE_MANAGER, NEXTKIT_SKIP_INSTALL,
            NEXTKIT_ASSUME_YES.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("NEXTKIT_ROOT"):
            kwargs["root_dir"] = Path(os.environ["NEXTKIT_ROOT"])
        if os.environ.get("NEXTKIT_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["NEXTKIT_PACKAGE_MANAGER"].strip().lower()
        if os.environ.get("NEXTKIT_SKIP_INSTALL"):
            kwargs["skip_install"] = _env_flag("NEXTKIT_SKIP_INSTALL")
        if os.environ.get("NEXTKIT_ASSUME_YES"):
            kwargs["assume_yes"] = _env_flag("NEXTKIT_ASSUME_YES")
        return cls(**kwargs)

    def merged(self, **overrides: object) -> "Config":
        """Return a copy with every non-``None`` override applied."""
        update = {key: value for key, value in overrides.items() if value is not None}
        return self.model_copy(update=update)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY
