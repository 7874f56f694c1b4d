"""
pytest configuration and shared fixtures for authkit tests.

Fixtures defined here are automatically available to all test modules.

Fixtures
--------
templates_root : Path
    A templates root holding two templates and a stray file.

empty_templates_root : Path
    A templates root with no templates.

make_template : Callable
    Factory that writes a template directory from a file mapping.
"""

from collections.abc import Callable
from pathlib import Path

import pytest


EXPRESS_README = """\
# Express Prisma
Description: JWT cookie auth on Express with Prisma
Language: TypeScript

Run `npm install` in {{PROJECT_NAME}} to get started.
"""

GO_README = """\
# Go Chi
description: Session auth with chi and sqlc
language: Go
"""


def write_template(root: Path, dir_name: str, files: dict[str, str]) -> Path:
    """
    Write a template directory under ``root``.

    Parameters
    ----------
    root : Path
        Templates root.
    dir_name : str
        Template directory name.
    files : dict[str, str]
        Relative file path to content. Parent directories are created.

    Returns
    -------
    Path
        The template directory.
    """
    template_dir = root / dir_name
    template_dir.mkdir(parents=True)
    for rel, content in files.items():
        target = template_dir / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return template_dir


@pytest.fixture
def make_template(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing templates under ``tmp_path / 'templates'``."""
    root = tmp_path / "templates"
    root.mkdir(exist_ok=True)

    def _make(dir_name: str, files: dict[str, str]) -> Path:
        return write_template(root, dir_name, files)

    return _make


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """
    Create a templates root with two templates.

    Layout::

        templates/
        ├── NOTES.txt               (not a template)
        ├── express-prisma/
        │   ├── README.md
        │   ├── package.json
        │   └── src/app.ts
        └── go-chi/
            ├── README.md
            └── main.go
    """
    root = tmp_path / "templates"
    root.mkdir(exist_ok=True)
    (root / "NOTES.txt").write_text("not a template\n", encoding="utf-8")

    write_template(root, "express-prisma", {
        "README.md": EXPRESS_README,
        "package.json": '{\n  "name": "{{PROJECT_NAME}}"\n}\n',
        "src/app.ts": 'const app = "{{PROJECT_NAME}}";\nexport default app;\n',
    })
    write_template(root, "go-chi", {
        "README.md": GO_README,
        "main.go": "package main\n\n// {{PROJECT_NAME}} entry point\nfunc main() {}\n",
    })
    return root


@pytest.fixture
def empty_templates_root(tmp_path: Path) -> Path:
    """Create a templates root with no template directories."""
    root = tmp_path / "empty-templates"
    root.mkdir()
    return root


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """A clean directory to scaffold projects into."""
    path = tmp_path / "work"
    path.mkdir()
    return path


# =============================================================================
# pytest Configuration
# =============================================================================

def pytest_configure(config: pytest.Config) -> None:
    """
    Configure pytest with custom markers.

    This function is called by pytest during startup to register
    custom markers used in our test suite.
    """
    config.addinivalue_line(
        "markers", "posix: marks tests relying on POSIX permissions"
    )
