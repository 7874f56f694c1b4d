"""
authkit.cli - Command Line Interface
====================================

This module provides the command-line interface for authkit using Typer.

Architecture
------------
    app (main entry point)
    ├── list     - List available templates
    ├── info     - Show one template's details and README
    ├── init     - Scaffold a new project interactively
    ├── check    - Verify a template's required tools are installed
    └── version  - Print the version

Global options (``--templates-dir``, ``--config``) are stored by the app
callback in ``ctx.obj``; commands that need settings resolve them there.

Every ``AuthkitError`` raised by the core is reported here as
``Error: <message>`` on stderr with exit code 1.

Usage Examples
--------------
    $ authkit list
    $ authkit info express-prisma
    $ authkit --templates-dir ~/authkit/templates init
    $ authkit check express-prisma --tool docker

See Also
--------
- scaffold.py: The interactive init flow
- registry.py: Template discovery
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from authkit import __version__
from authkit.config import load_settings
from authkit.envcheck import check_env, tools_for_template
from authkit.errors import AuthkitError
from authkit.models import AuthkitSettings
from authkit.registry import TemplateRegistry
from authkit.scaffold import run_init


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="authkit",
    help="AuthKit CLI for scaffolding secure authentication backends.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=True,
)

# Console for rich output
console = Console()
err_console = Console(stderr=True)


def fail(error: Exception) -> typer.Exit:
    """Print an error and build the matching exit."""
    err_console.print(f"[red]Error:[/] {escape(str(error))}", soft_wrap=True)
    return typer.Exit(1)


def get_settings(ctx: typer.Context) -> AuthkitSettings:
    """
    Resolve settings from the global options stored by the app callback.

    Only commands that need settings call this, so a broken settings
    file does not affect ``version``.
    """
    options = ctx.find_root().obj or {}
    try:
        return load_settings(options.get("config"), options.get("templates_dir"))
    except AuthkitError as e:
        raise fail(e)


# =============================================================================
# Version Callback
# =============================================================================

def version_callback(value: bool) -> None:
    """
    Display version information and exit.

    Parameters
    ----------
    value : bool
        True if --version was passed.
    """
    if value:
        console.print(f"AuthKit CLI version {__version__}")
        raise typer.Exit()


# =============================================================================
# Main Application Callback
# =============================================================================

@app.callback()
def main(
    ctx: typer.Context,
    templates_dir: Annotated[
        Path | None,
        typer.Option(
            "--templates-dir",
            envvar="AUTHKIT_TEMPLATES_DIR",
            help="Directory containing one subdirectory per template.",
            file_okay=False,
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file (default: ./authkit.toml when present).",
            dir_okay=False,
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    [bold]authkit[/] - Scaffold secure, production-ready authentication backends.

    [bold]Quick Start:[/]

        authkit list

        authkit init
    """
    ctx.obj = {"config": config, "templates_dir": templates_dir}


# =============================================================================
# Read-only Commands
# =============================================================================

@app.command("list")
def list_templates(ctx: typer.Context) -> None:
    """
    List available templates.

    [bold]Example:[/]

        authkit list
    """
    settings = get_settings(ctx)
    try:
        templates = TemplateRegistry(settings.templates_dir).discover()
    except AuthkitError as e:
        raise fail(e)

    if not templates:
        console.print(f"[yellow]No templates found in {escape(str(settings.templates_dir))}[/]")
        return

    table = Table(title="Available Templates", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Language", style="green")
    table.add_column("Directory", style="dim")

    for t in templates:
        table.add_row(
            escape(t.display_name),
            escape(t.description),
            escape(t.language),
            escape(t.dir_name),
        )

    console.print(table)


@app.command()
def info(
    ctx: typer.Context,
    name: Annotated[
        str,
        typer.Argument(help="Template name or directory name"),
    ],
) -> None:
    """
    Show details for a specific template.

    [bold]Examples:[/]

        authkit info express-prisma
        authkit info "Express + Prisma"
    """
    settings = get_settings(ctx)
    try:
        template = TemplateRegistry(settings.templates_dir).lookup(name)
    except AuthkitError as e:
        raise fail(e)

    table = Table(show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Name", escape(template.name))
    table.add_row("Description", escape(template.description))
    table.add_row("Language", escape(template.language))
    table.add_row("Path", escape(str(template.path)))
    console.print(table)

    if template.readme:
        console.print()
        console.print("[bold]README:[/]")
        console.print(template.readme, markup=False, highlight=False)


@app.command()
def version() -> None:
    """Print the version number of AuthKit CLI."""
    console.print(f"AuthKit CLI version {__version__}")


# =============================================================================
# Init Command - Scaffold a New Project
# =============================================================================

@app.command()
def init(ctx: typer.Context) -> None:
    """
    Scaffold a new AuthKit project from a template.

    Prompts for a template number and a project name, then copies the
    template into a new directory under the current one, replacing
    [cyan]{{PROJECT_NAME}}[/] with the project name.

    [bold]Example:[/]

        authkit init
    """
    settings = get_settings(ctx)
    try:
        run_init(TemplateRegistry(settings.templates_dir))
    except AuthkitError as e:
        raise fail(e)


# =============================================================================
# Check Command - Pre-flight Tool Checks
# =============================================================================

@app.command()
def check(
    ctx: typer.Context,
    name: Annotated[
        str,
        typer.Argument(help="Template name or directory name"),
    ],
    tools: Annotated[
        list[str] | None,
        typer.Option(
            "--tool",
            "-t",
            help="Additional executable that must be on PATH (repeatable)",
        ),
    ] = None,
) -> None:
    """
    Check that the tools a template needs are installed.

    Tools are chosen from the template's language (see
    [cyan]required_tools[/] in authkit.toml), plus any given with --tool.

    [bold]Examples:[/]

        authkit check express-prisma
        authkit check express-prisma --tool docker
    """
    settings = get_settings(ctx)
    try:
        template = TemplateRegistry(settings.templates_dir).lookup(name)
        required = tools_for_template(template, settings) + list(tools or [])
        check_env(required)
    except AuthkitError as e:
        raise fail(e)

    if not required:
        console.print(
            f"[dim]No required tools for {escape(template.display_name)}.[/]"
        )
        return

    console.print(Panel(
        "[bold green]All required tools found:[/] " + escape(", ".join(required)),
        title=f"[bold]{escape(template.display_name)}[/]",
        border_style="green",
    ))


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
