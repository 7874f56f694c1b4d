"""
authkit.registry - Template Discovery
=====================================

Finds templates on disk and reads their metadata.

Each subdirectory of the templates root is one template. Its optional
``README.md`` supplies metadata through simple line prefixes::

    # Express + Prisma
    Description: JWT cookie auth on Express with Prisma
    Language: TypeScript

Discovery is stateless: nothing is cached, every call re-reads the disk.

Usage
-----
>>> from authkit.registry import TemplateRegistry
>>> registry = TemplateRegistry(Path("templates"))
>>> [t.name for t in registry.discover()]
['Express + Prisma']
>>> registry.lookup("express-prisma").language
'TypeScript'
"""

from __future__ import annotations

from pathlib import Path

from authkit.errors import DiscoveryError, NotFoundError
from authkit.models import README_FILENAME, Template


# =============================================================================
# Metadata Parsing
# =============================================================================

# Checked in order against the lower-cased line; first match wins per line.
META_PREFIXES: tuple[tuple[str, str], ...] = (
    ("# ", "name"),
    ("description:", "description"),
    ("language:", "language"),
)


def parse_readme_meta(text: str) -> dict[str, str]:
    """
    Extract name, description and language from README text.

    A line starting with ``# `` sets the name, ``description:`` the
    description and ``language:`` the language. Prefixes are matched
    case-insensitively after trimming the line; values keep their case.
    When several lines match the same key, the last one wins.

    Parameters
    ----------
    text : str
        Raw README content. May be empty.

    Returns
    -------
    dict[str, str]
        Exactly the keys ``name``, ``description`` and ``language``,
        each defaulting to an empty string.

    Examples
    --------
    >>> parse_readme_meta("# Foo\\nDescription: Bar\\nLanguage: Go\\n")
    {'name': 'Foo', 'description': 'Bar', 'language': 'Go'}
    """
    meta = {"name": "", "description": "", "language": ""}

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        lower = line.lower()
        for prefix, key in META_PREFIXES:
            if lower.startswith(prefix):
                meta[key] = line[len(prefix):].strip()
                break

    return meta


# =============================================================================
# Registry
# =============================================================================

class TemplateRegistry:
    """
    Templates found under a root directory.

    Parameters
    ----------
    root : Path
        The templates root. Each subdirectory is a template.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def discover(self) -> list[Template]:
        """
        Build a Template for every subdirectory of the root.

        Entries come back in directory-listing order, by name. Files
        directly under the root are ignored. A template without a
        README is still listed, with empty metadata.

        Returns
        -------
        list[Template]
            One record per template directory. Empty if there are none.

        Raises
        ------
        DiscoveryError
            If the root cannot be listed, or an existing README cannot
            be read.
        """
        try:
            entries = sorted(self.root.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise DiscoveryError(self.root, e.strerror or str(e)) from e

        templates: list[Template] = []
        for entry in entries:
            if not entry.is_dir():
                continue

            readme = self._read_readme(entry)
            meta = parse_readme_meta(readme)
            templates.append(
                Template(
                    name=meta["name"],
                    description=meta["description"],
                    language=meta["language"],
                    path=entry,
                    readme=readme,
                )
            )

        return templates

    def lookup(self, name: str) -> Template:
        """
        Find a template by name or directory name, ignoring case.

        Re-scans the root on every call.

        Parameters
        ----------
        name : str
            Template name (README heading) or directory name.

        Returns
        -------
        Template
            The first matching template in discovery order.

        Raises
        ------
        NotFoundError
            If no template matches.
        DiscoveryError
            If the root cannot be listed.
        """
        wanted = name.casefold()
        for template in self.discover():
            if template.name.casefold() == wanted or template.dir_name.casefold() == wanted:
                return template
        raise NotFoundError(name)

    def _read_readme(self, template_dir: Path) -> str:
        readme_path = template_dir / README_FILENAME
        try:
            return readme_path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return ""
        except OSError as e:
            raise DiscoveryError(
                self.root, f"cannot read {readme_path}: {e.strerror or e}"
            ) from e
