"""
authkit.config - Settings Resolution
====================================

Builds the ``AuthkitSettings`` used by every command. Sources are applied
in increasing precedence:

    1. Model defaults (``templates/`` under the working directory)
    2. A TOML settings file: ``--config`` if given, else ``authkit.toml``
       in the working directory when it exists
    3. ``--templates-dir`` / ``AUTHKIT_TEMPLATES_DIR``

Example ``authkit.toml``::

    templates_dir = "../templates"

    [required_tools]
    typescript = ["node", "npm", "npx"]
"""

from __future__ import annotations

from pathlib import Path

from authkit.errors import ConfigError
from authkit.models import DEFAULT_CONFIG_FILENAME, AuthkitSettings


def load_settings(
    config_path: Path | None = None,
    templates_dir: Path | None = None,
    *,
    workdir: Path | None = None,
) -> AuthkitSettings:
    """
    Resolve settings from defaults, a settings file, and overrides.

    Parameters
    ----------
    config_path : Path | None
        Explicit settings file. It must exist.

    templates_dir : Path | None
        Override for the templates root.

    workdir : Path | None
        Directory searched for ``authkit.toml``. Defaults to the cwd.

    Returns
    -------
    AuthkitSettings
        The merged settings.

    Raises
    ------
    ConfigError
        If the explicit settings file is missing, or any settings file
        is invalid.
    """
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"settings file '{config_path}' does not exist")
        settings = AuthkitSettings.from_toml(config_path)
    else:
        candidate = (workdir or Path.cwd()) / DEFAULT_CONFIG_FILENAME
        if candidate.is_file():
            settings = AuthkitSettings.from_toml(candidate)
        else:
            settings = AuthkitSettings()

    if templates_dir is not None:
        settings = settings.model_copy(update={"templates_dir": templates_dir})

    return settings
