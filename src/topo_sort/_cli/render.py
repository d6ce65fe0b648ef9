"""Rich rendering utilities for sort results."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from topo_sort._store import TopoSort


def render_order_table(order: list[str], store: TopoSort[str], console: Console) -> None:
    """Render resolved nodes as a Rich table.

    Only dependencies that are nodes of the store are listed; the others
    do not take part in the ordering.

    Args:
        order: Nodes in resolution order.
        store: The store the nodes were sorted from.
        console: Rich Console to output to.

    """
    if not order:
        console.print("[dim]No nodes to sort[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Node", style="bold")
    table.add_column("Depends on")

    for position, node in enumerate(order, start=1):
        depends = sorted(dep for dep in store[node] if dep in store and dep != node)
        table.add_row(str(position), escape(node), escape(", ".join(depends)))

    console.print(table)


def render_node_list(title: str, nodes: Iterable[str], console: Console, *, style: str = "yellow") -> None:
    """Render a bulleted list of nodes under a title."""
    console.print(f"[{style}]{title}[/{style}]")
    for node in sorted(nodes):
        console.print(f"  [{style}]•[/{style}] {escape(node)}")
