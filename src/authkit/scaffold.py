"""
authkit.scaffold - Interactive Project Scaffolding
==================================================

Implements ``authkit init``: pick a template, name the project, copy.

Pipeline
--------
    1. Discover templates
    2. Show them with 1-based indices
    3. Read the selection (one line)
    4. Read the project name (one line)
    5. Refuse an existing project directory
    6. Copy the template with the placeholder replaced
    7. Print next steps

Input is read exactly twice. There is no re-prompt loop: a single bad
answer aborts the run with an ``AuthkitError``.

Example
-------
>>> from authkit.registry import TemplateRegistry
>>> from authkit.scaffold import run_init
>>> answers = iter(["1", "my-api"])
>>> result = run_init(TemplateRegistry(Path("templates")), read_line=lambda _: next(answers))
>>> result.project_path.name
'my-api'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from authkit.copier import copy_template_dir
from authkit.errors import (
    AlreadyExistsError,
    AuthkitError,
    EmptyNameError,
    InvalidSelectionError,
    NoTemplatesError,
    ScaffoldError,
)
from authkit.models import Template


if TYPE_CHECKING:
    from collections.abc import Callable

    from authkit.registry import TemplateRegistry


# Console for rich output
console = Console()


# =============================================================================
# Result Data Classes
# =============================================================================

@dataclass
class ScaffoldResult:
    """
    Outcome of a successful ``init`` run.

    Attributes
    ----------
    template : Template
        The template that was copied.

    project_path : Path
        Directory the project was created in.

    files_created : list[Path]
        Every file written by the copy.
    """

    template: Template
    project_path: Path
    files_created: list[Path] = field(default_factory=list)


# =============================================================================
# Input
# =============================================================================

def _console_read_line(prompt: str) -> str:
    """Read one line from stdin. End of input counts as an empty answer."""
    try:
        return console.input(prompt)
    except EOFError:
        return ""


def parse_selection(raw: str, count: int) -> int:
    """
    Turn a typed selection into a zero-based template index.

    Parameters
    ----------
    raw : str
        The line the user typed.

    count : int
        Number of templates offered.

    Returns
    -------
    int
        Index into the template list.

    Raises
    ------
    InvalidSelectionError
        If ``raw`` is not an integer in ``[1, count]``.
    """
    try:
        choice = int(raw.strip())
    except ValueError:
        raise InvalidSelectionError(raw.strip(), count) from None

    if choice < 1 or choice > count:
        raise InvalidSelectionError(raw.strip(), count)

    return choice - 1


def resolve_project_path(workdir: Path, project_name: str) -> Path:
    """
    Place a project name under the working directory.

    A leading root or drive is dropped, so ``/srv/api`` becomes
    ``<workdir>/srv/api`` rather than an absolute path.
    """
    name = Path(project_name)
    if name.anchor:
        name = name.relative_to(name.anchor)
    return workdir / name


# =============================================================================
# Main Scaffold Function
# =============================================================================

def run_init(
    registry: TemplateRegistry,
    *,
    read_line: Callable[[str], str] | None = None,
    workdir: Path | None = None,
    verbose: bool = True,
) -> ScaffoldResult:
    """
    Interactively scaffold a new project from a template.

    Parameters
    ----------
    registry : TemplateRegistry
        Where templates are discovered.

    read_line : Callable[[str], str] | None
        Called with a prompt, returns one line of input. Defaults to
        reading stdin through the rich console.

    workdir : Path | None
        Directory the project is created in. Defaults to the cwd.

    verbose : bool, default=True
        If True, print the template list and progress.

    Returns
    -------
    ScaffoldResult
        The chosen template, project directory and written files.

    Raises
    ------
    DiscoveryError
        If the templates root cannot be listed.
    NoTemplatesError
        If there are no templates.
    InvalidSelectionError
        If the selection is not a listed number.
    EmptyNameError
        If the project name is blank.
    AlreadyExistsError
        If the project directory already exists.
    ScaffoldError
        If copying the template fails. Partial output is left in place.
    """
    read = read_line or _console_read_line

    # Step 1: Discover templates
    templates = registry.discover()
    if not templates:
        raise NoTemplatesError()

    # Step 2: Present the list
    if verbose:
        console.print("[bold]Select a template:[/]")
        for i, t in enumerate(templates, 1):
            console.print(f"  \\[{i}] {escape(t.display_name)} [dim]({escape(t.language)})[/]")

    # Step 3: Read the selection
    template = templates[parse_selection(read("Enter number: "), len(templates))]

    # Step 4: Read the project name
    project_name = read("Project name: ").strip()
    if not project_name:
        raise EmptyNameError()

    # Step 5: Refuse an existing directory
    project_path = resolve_project_path(workdir or Path.cwd(), project_name)
    if project_path.exists():
        raise AlreadyExistsError(project_path)

    # Step 6: Copy
    if verbose:
        console.print(
            f"Scaffolding [cyan]{escape(template.display_name)}[/] "
            f"into [green]{escape(str(project_path))}[/]..."
        )

    try:
        written = copy_template_dir(template.path, project_path, project_name)
    except AuthkitError as e:
        raise ScaffoldError(e) from e

    # Step 7: Next steps
    if verbose:
        console.print()
        console.print(
            Panel(
                f"[bold green]Project scaffolded successfully![/]\n\n"
                f"[dim]Location:[/] {escape(str(project_path))}\n"
                f"[dim]Files:[/] {len(written)}\n\n"
                f"[bold]Next steps:[/]\n"
                f"  cd {escape(project_name)}\n"
                f"  Follow the README.md for setup instructions.",
                title="[bold green]Success[/]",
                border_style="green",
            )
        )

    return ScaffoldResult(template=template, project_path=project_path, files_created=written)
