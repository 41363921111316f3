"""Rich rendering of nodes for the command line."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from pathtree.model.directory import Directory
from pathtree.model.file import File

if TYPE_CHECKING:
    from pathtree.model.path import Path
    from pathtree.registry import FileTypeRule


def describe_kind(node: Path) -> str:
    """Short label for the kind of a node."""
    return type(node).__name__


class Display:
    """Non-interactive output for pathtree commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize display.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_nodes(self, nodes: list[Path], title: str) -> None:
        """Display nodes as a table.

        Args:
            nodes: Nodes to list.
            title: Table title.
        """
        if not nodes:
            self.console.print("[yellow]Nothing found[/yellow]")
            return

        table = Table(title=title)
        table.add_column("Name", style="cyan")
        table.add_column("Kind")
        table.add_column("Size", justify="right")
        table.add_column("Path")

        for node in nodes:
            size = node.get_size() if isinstance(node, File) else None
            table.add_row(
                escape(node.get_name()),
                describe_kind(node),
                "" if size is None else str(size),
                escape(node.get_path()),
            )

        self.console.print(table)

    def show_tree(self, directory: Directory) -> None:
        """Display a directory and everything below it."""
        root = Tree(f"[bold cyan]{escape(directory.get_display_path())}[/bold cyan]")
        self._add_children(root, directory)
        self.console.print(root)

    def _add_children(self, branch: Tree, directory: Directory) -> None:
        for node in directory.list():
            if isinstance(node, Directory) and not node.is_link():
                self._add_children(branch.add(f"[cyan]{escape(node.get_name())}/[/cyan]"), node)
            else:
                branch.add(f"{escape(node.get_name())} [dim]({describe_kind(node)})[/dim]")

    def show_contents(self, contents: Any) -> None:
        """Display file content; structured content is shown as JSON.

        Raw bytes are decoded as UTF-8 with undecodable bytes replaced.
        """
        if isinstance(contents, (dict, list)):
            self.console.print_json(json.dumps(contents))
            return
        if isinstance(contents, bytes):
            contents = contents.decode("utf-8", errors="replace")
        self.console.out(contents, highlight=False)

    def show_types(self, rules: list[FileTypeRule]) -> None:
        """Display registered suffix rules in lookup order."""
        table = Table(title="File Types")
        table.add_column("#", justify="right")
        table.add_column("Suffix", style="cyan")
        table.add_column("Kind")

        for index, rule in enumerate(rules, start=1):
            table.add_row(str(index), escape(rule.suffix), rule.kind.__name__)

        self.console.print(table)

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {message}")
