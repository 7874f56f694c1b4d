"""
authkit.errors - Error Taxonomy
===============================

Every failure the core can report is an ``AuthkitError`` subclass. The core
never recovers from these itself: they propagate to the caller, and the CLI
is the single place where they are turned into a message and an exit code.

Hierarchy
---------
    AuthkitError
    ├── ConfigError
    ├── DiscoveryError
    ├── NotFoundError
    ├── NoTemplatesError
    ├── InvalidSelectionError
    ├── EmptyNameError
    ├── AlreadyExistsError
    ├── DestinationNotEmptyError
    ├── CopyError          (wraps an I/O cause)
    ├── ScaffoldError      (wraps any copy failure during init)
    └── ToolNotFoundError  (carries the tool name)
"""

from __future__ import annotations

from pathlib import Path


class AuthkitError(Exception):
    """Base class for all errors reported by authkit."""


class ConfigError(AuthkitError):
    """Raised when a settings file cannot be read or fails validation."""


class DiscoveryError(AuthkitError):
    """Raised when the templates root cannot be listed."""

    def __init__(self, root: Path, reason: str) -> None:
        self.root = root
        super().__init__(f"could not discover templates in '{root}': {reason}")


class NotFoundError(AuthkitError, LookupError):
    """Raised when no template matches a requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"template '{name}' not found")


class NoTemplatesError(AuthkitError):
    """Raised when discovery finds no templates to choose from."""

    def __init__(self) -> None:
        super().__init__("no templates found")


class InvalidSelectionError(AuthkitError):
    """Raised when the template selection is not a number in range."""

    def __init__(self, raw: str, count: int) -> None:
        self.raw = raw
        super().__init__(
            f"invalid selection '{raw}': expected a number between 1 and {count}"
        )


class EmptyNameError(AuthkitError):
    """Raised when the project name is blank."""

    def __init__(self) -> None:
        super().__init__("project name cannot be empty")


class AlreadyExistsError(AuthkitError):
    """Raised when the project directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"directory '{path}' already exists")


class DestinationNotEmptyError(AuthkitError):
    """Raised when the copy destination already holds at least one entry."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"destination directory '{path}' already exists and is not empty"
        )


class CopyError(AuthkitError):
    """
    Raised when copying a template tree fails partway.

    Attributes
    ----------
    cause : BaseException
        The underlying I/O or decoding error. Also chained as ``__cause__``.
    """

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to copy '{path}': {cause}")


class ScaffoldError(AuthkitError):
    """Raised by ``init`` when the template copy fails for any reason."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"failed to copy template: {cause}")


class ToolNotFoundError(AuthkitError):
    """Raised when a required executable is not on the search path."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"required tool '{tool}' not found in PATH")
