"""
authkit.models - Pydantic Models for Templates and Settings
===========================================================

This module defines the data models used throughout authkit. As elsewhere
in the package we use Pydantic for:

1. **Validation**: Settings files are checked with clear error messages
2. **Immutability**: Template records are frozen snapshots of disk state
3. **Type Safety**: Full type hints that work with basedpyright/pyright

Architecture Notes
------------------
    Template (read-only snapshot of one template directory)
    ├── name: str
    ├── description: str
    ├── language: str
    ├── path: Path
    └── readme: str

    AuthkitSettings (runtime configuration)
    ├── templates_dir: Path
    └── required_tools: dict[str, list[str]]

Usage Example
-------------
>>> from authkit.models import Template
>>> template = Template(name="Express + Prisma", path=Path("templates/express-prisma"))
>>> template.dir_name
'express-prisma'
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from authkit.errors import ConfigError


# =============================================================================
# Constants
# =============================================================================

#: README file parsed for template metadata.
README_FILENAME = "README.md"

#: Settings file picked up from the working directory when present.
DEFAULT_CONFIG_FILENAME = "authkit.toml"

#: Pre-flight tools per template language.
DEFAULT_REQUIRED_TOOLS: dict[str, list[str]] = {
    "typescript": ["node", "npm"],
    "javascript": ["node", "npm"],
    "go": ["go"],
    "python": ["python3"],
    "rust": ["cargo"],
}


# =============================================================================
# Template Record
# =============================================================================

class Template(BaseModel):
    """
    One scaffoldable project skeleton found under the templates root.

    Records are built fresh by every discovery call and never mutated
    afterwards. They are only valid while the underlying directory is
    unchanged.

    Attributes
    ----------
    name : str
        Text of the README's ``# `` heading, or empty.

    description : str
        Value of the README's ``description:`` line, or empty.

    language : str
        Value of the README's ``language:`` line, or empty.

    path : Path
        Root directory of the template.

    readme : str
        Raw README text, or empty if the template has no README.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""
    language: str = ""
    path: Path
    readme: str = ""

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: Path) -> Path:
        """Reject an empty path, which would silently mean the cwd."""
        if not str(v) or str(v) == ".":
            msg = "Template path must not be empty"
            raise ValueError(msg)
        return v

    @property
    def dir_name(self) -> str:
        """Final segment of the template path (e.g. ``express-prisma``)."""
        return self.path.name

    @property
    def display_name(self) -> str:
        """Name for listings, falling back to the directory name."""
        return self.name or self.dir_name


# =============================================================================
# Settings
# =============================================================================

class AuthkitSettings(BaseModel):
    """
    Runtime configuration for authkit.

    Settings come from defaults, an optional TOML file, and command-line
    overrides, in that order. See ``authkit.config.load_settings``.

    Attributes
    ----------
    templates_dir : Path
        Directory holding one subdirectory per template. Relative paths
        are resolved against the working directory.

    required_tools : dict[str, list[str]]
        Executables that must be on PATH before using a template, keyed
        by lower-cased template language.

    Examples
    --------
    >>> settings = AuthkitSettings(templates_dir=Path("/opt/authkit/templates"))
    >>> settings.tools_for_language("TypeScript")
    ['node', 'npm']
    """

    model_config = ConfigDict(extra="forbid")

    templates_dir: Path = Field(
        default=Path("templates"),
        description="Templates root directory",
    )
    required_tools: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_REQUIRED_TOOLS.items()},
        description="Pre-flight tools keyed by template language",
    )

    @field_validator("required_tools")
    @classmethod
    def normalize_languages(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        """Lower-case language keys so lookups ignore case."""
        return {language.lower().strip(): tools for language, tools in v.items()}

    def tools_for_language(self, language: str) -> list[str]:
        """
        Required tools for a template language.

        Parameters
        ----------
        language : str
            Language as parsed from a template README. Case is ignored.

        Returns
        -------
        list[str]
            Tool names, empty if the language is unknown or blank.
        """
        return list(self.required_tools.get(language.lower().strip(), []))

    @classmethod
    def from_toml(cls, path: Path) -> AuthkitSettings:
        """
        Load settings from a TOML file.

        Parameters
        ----------
        path : Path
            Path to the TOML settings file.

        Returns
        -------
        AuthkitSettings
            Validated settings.

        Raises
        ------
        ConfigError
            If the file cannot be read, is not valid TOML, or has
            invalid values.
        """
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigError(f"cannot read settings file '{path}': {e}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"invalid TOML in '{path}': {e}") from e

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"invalid settings in '{path}': {e}") from e
