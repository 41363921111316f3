"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from pathtree import __version__
from pathtree.config import create_base, load_settings
from pathtree.console import Display
from pathtree.errors import PathTreeError
from pathtree.model.base import Base
from pathtree.model.directory import Directory
from pathtree.model.glob import Glob
from pathtree.model.path import RealPath

app = typer.Typer(
    name="pathtree",
    help="Inspect a directory tree through the pathtree node model",
    no_args_is_help=True,
)

display = Display()

BaseOption = Annotated[
    str | None, typer.Option("--base", "-b", help="Base directory (overrides settings)")
]
ConfigOption = Annotated[
    Path | None, typer.Option("--config", "-c", help="Settings file (YAML or JSON)")
]


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        display.console.print(f"pathtree v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log backend operations")
    ] = False,
) -> None:
    """Inspect a directory tree through the pathtree node model."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _open_base(base_dir: str | None, config: Path | None) -> Base:
    """Build the tree root from settings and command line overrides."""
    settings = load_settings(config)
    if base_dir is not None:
        settings = settings.model_copy(update={"base_directory": base_dir})
    return create_base(settings)


def _fail(error: PathTreeError) -> typer.Exit:
    """Report an error and build the exit to raise."""
    display.show_error(str(error))
    return typer.Exit(1)


@app.command("ls")
def list_command(
    path: Annotated[str, typer.Argument(help="Path relative to the base")] = "",
    base_dir: BaseOption = None,
    config: ConfigOption = None,
    _base=None,
) -> None:
    """List a directory, or the matches of a pattern."""
    try:
        base = _base or _open_base(base_dir, config)
        node = base.with_path(path)
        if isinstance(node, Glob):
            nodes = node.glob()
        elif isinstance(node, Directory):
            nodes = node.list()
        else:
            nodes = [node] if node.exists() else []
        display.show_nodes(nodes, title=node.get_display_path())
    except PathTreeError as e:
        raise _fail(e) from e


@app.command("tree")
def tree_command(
    path: Annotated[str, typer.Argument(help="Directory relative to the base")] = "",
    base_dir: BaseOption = None,
    config: ConfigOption = None,
    _base=None,
) -> None:
    """Show a directory and everything below it."""
    try:
        base = _base or _open_base(base_dir, config)
        display.show_tree(base.with_directory(path))
    except PathTreeError as e:
        raise _fail(e) from e


@app.command("cat")
def cat_command(
    path: Annotated[str, typer.Argument(help="File relative to the base")],
    base_dir: BaseOption = None,
    config: ConfigOption = None,
    _base=None,
) -> None:
    """Print the content of a file, decoded by its kind."""
    try:
        base = _base or _open_base(base_dir, config)
        display.show_contents(base.with_file(path).get_contents())
    except PathTreeError as e:
        raise _fail(e) from e


@app.command("glob")
def glob_command(
    pattern: Annotated[str, typer.Argument(help="Pattern relative to the base")],
    base_dir: BaseOption = None,
    config: ConfigOption = None,
    _base=None,
) -> None:
    """Expand a wildcard pattern into typed nodes."""
    try:
        base = _base or _open_base(base_dir, config)
        node = base.with_path(pattern)
        if isinstance(node, Glob):
            nodes = node.glob()
        else:
            nodes = [node] if isinstance(node, RealPath) and node.exists() else []
        display.show_nodes(nodes, title=pattern)
    except PathTreeError as e:
        raise _fail(e) from e


@app.command("types")
def types_command(
    base_dir: BaseOption = None,
    config: ConfigOption = None,
    _base=None,
) -> None:
    """Show the file type rules in lookup order."""
    try:
        base = _base or _open_base(base_dir, config)
    except PathTreeError as e:
        raise _fail(e) from e
    display.show_types(base.get_file_types().list_types())
