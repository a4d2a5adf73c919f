"""Exception types raised by nextkit commands."""

from __future__ import annotations


class NextkitError(Exception):
    """Base class for all nextkit errors."""


class ConfigurationError(NextkitError):
    """The target project cannot be scaffolded as it stands.

    Raised when no ``package.json`` manifest exists or when neither routing
    convention marker directory (``app`` / ``pages``) can be found.
    """


class InputError(NextkitError):
    """User-supplied input leaves the command with nothing meaningful to do."""
