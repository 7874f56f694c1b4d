"""
authkit.copier - Template Tree Copy
===================================

Copies a template directory into a new project directory, replacing the
``{{PROJECT_NAME}}`` placeholder with the project name.

Files are treated as UTF-8 text and copied line by line. Every written
line ends with ``\\n``, so a last line without a newline gains one and
CRLF endings become LF. Binary files are not supported: content that
does not decode aborts the copy.

There is no rollback. If a copy fails partway, files already written
stay on disk.
"""

from __future__ import annotations

from pathlib import Path

from authkit.errors import CopyError, DestinationNotEmptyError


#: Literal token replaced with the project name in every copied line.
PLACEHOLDER = "{{PROJECT_NAME}}"


def copy_template_dir(source: Path, destination: Path, project_name: str) -> list[Path]:
    """
    Recursively copy a template into a destination directory.

    Parameters
    ----------
    source : Path
        Template root directory.

    destination : Path
        Where the copy is created. May already exist if it is empty.

    project_name : str
        Replacement for every ``{{PROJECT_NAME}}`` occurrence.

    Returns
    -------
    list[Path]
        Files written, in copy order.

    Raises
    ------
    DestinationNotEmptyError
        If the destination already contains an entry. Nothing is copied.
    CopyError
        If any walk, read or write fails. Wraps the underlying error. Paths the
        OS rejects, such as names with a NUL byte, are reported the same way.
    """
    try:
        occupied = destination.is_dir() and any(destination.iterdir())
    except (OSError, ValueError) as e:
        raise CopyError(destination, e) from e
    if occupied:
        raise DestinationNotEmptyError(destination)

    if not source.is_dir():
        raise CopyError(source, NotADirectoryError(f"'{source}' is not a directory"))

    written: list[Path] = []
    _copy_tree(source, destination, project_name, written)
    return written


def _copy_tree(source: Path, destination: Path, project_name: str, written: list[Path]) -> None:
    try:
        destination.mkdir(parents=True, exist_ok=True)
        entries = sorted(source.iterdir(), key=lambda p: p.name)
    except (OSError, ValueError) as e:
        raise CopyError(source, e) from e

    for entry in entries:
        target = destination / entry.name
        if entry.is_dir():
            _copy_tree(entry, target, project_name, written)
        else:
            _copy_file(entry, target, project_name)
            written.append(target)


def _copy_file(source: Path, target: Path, project_name: str) -> None:
    try:
        with (
            open(source, encoding="utf-8") as src,
            open(target, "w", encoding="utf-8", newline="\n") as dst,
        ):
            for line in src:
                dst.write(line.rstrip("\n").replace(PLACEHOLDER, project_name) + "\n")
    except (OSError, ValueError) as e:
        raise CopyError(source, e) from e
