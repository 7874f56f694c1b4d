"""
authkit.envcheck - Pre-flight Tool Checks
=========================================

Verifies that the executables a template needs are on PATH before the
user starts working with it (e.g. ``node`` and ``npm`` for TypeScript).
"""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from authkit.errors import ToolNotFoundError


if TYPE_CHECKING:
    from collections.abc import Iterable

    from authkit.models import AuthkitSettings, Template


def check_env(tool_names: Iterable[str]) -> None:
    """
    Ensure every tool resolves to an executable on PATH.

    Tools are checked in order and the first missing one is reported;
    the rest are not checked.

    Parameters
    ----------
    tool_names : Iterable[str]
        Executable names, or paths to executables.

    Raises
    ------
    ToolNotFoundError
        For the first tool that cannot be resolved.
    """
    for tool in tool_names:
        if shutil.which(tool) is None:
            raise ToolNotFoundError(tool)


def tools_for_template(template: Template, settings: AuthkitSettings) -> list[str]:
    """Tools required by a template, based on its README language."""
    return settings.tools_for_language(template.language)
