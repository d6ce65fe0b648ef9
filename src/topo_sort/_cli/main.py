import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from topo_sort._errors import CycleError, InputError
from topo_sort._io import export_order_to_toml, load_store_from_toml
from topo_sort._store import TopoSort

from .config import ConfigError, TopoSortConfig, get_config
from .render import render_node_list, render_order_table

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Sort nodes by their dependencies, detecting cycles."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
        force=True,
    )


def _load_config() -> TopoSortConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _load_store(input_path: Path | None, config: TopoSortConfig) -> TopoSort[str]:
    """Load the dependency file given on the command line or configured in pyproject.toml."""
    if input_path is None:
        input_path = config.input
    if input_path is None:
        err_console.print("[red]Error: No input file given and no input configured in pyproject.toml[/red]")
        raise typer.Exit(code=1)
    if not input_path.exists():
        err_console.print(f"[red]Error: Input file not found: {escape(str(input_path))}[/red]")
        raise typer.Exit(code=1)

    err_console.print(f"[cyan]Loading dependencies from:[/cyan] {escape(str(input_path))}")
    try:
        return load_store_from_toml(input_path)
    except InputError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _sort(store: TopoSort[str]) -> tuple[list[str], list[str]]:
    """Sort the store, returning the resolved nodes and the nodes left by a cycle."""
    resolved: list[str] = []
    for result in store.nodes():
        if isinstance(result, CycleError):
            seen = set(resolved)
            unresolved = [node for node in store.as_map() if node not in seen]
            logger.debug("Resolved %d of %d nodes before a cycle", len(resolved), len(store))
            return resolved, unresolved
        resolved.append(result)
    logger.debug("Resolved all %d nodes", len(resolved))
    return resolved, []


def _report_cycle(unresolved: list[str]) -> None:
    """Print the nodes left over by a cycle and exit with an error."""
    err_console.print(f"[red]✗ Cycle detected: {len(unresolved)} nodes cannot be ordered[/red]")
    render_node_list("Unresolved nodes:", unresolved, err_console, style="red")
    raise typer.Exit(code=1)


@app.command()
def order(
    input: Annotated[  # noqa: A002
        Path | None,
        typer.Argument(help="Path to dependency TOML file (defaults to the configured input)"),
    ] = None,
    *,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Path to output TOML file (defaults to the configured output)"),
    ] = None,
    partial: Annotated[
        bool,
        typer.Option("--partial", help="Print the nodes resolved before a cycle"),
    ] = False,
) -> None:
    """Print the nodes of a dependency file in dependency order."""
    config = _load_config()
    store = _load_store(input, config)

    resolved, unresolved = _sort(store)

    if not unresolved or partial:
        render_order_table(resolved, store, out_console)

    if output is None:
        output = config.output
    if output is not None:
        err_console.print(f"[cyan]Exporting order to:[/cyan] {escape(str(output))}")
        export_order_to_toml(resolved, output, unresolved=unresolved)

    if unresolved:
        _report_cycle(unresolved)


@app.command()
def check(
    input: Annotated[  # noqa: A002
        Path | None,
        typer.Argument(help="Path to dependency TOML file (defaults to the configured input)"),
    ] = None,
) -> None:
    """Check that a dependency file can be ordered."""
    config = _load_config()
    store = _load_store(input, config)

    dangling = {dep for deps in store.as_map().values() for dep in deps if dep not in store}
    if dangling:
        render_node_list("⚠ Dependencies that are not nodes (ignored):", dangling, err_console)

    _, unresolved = _sort(store)
    if unresolved:
        _report_cycle(unresolved)

    err_console.print(f"[green]✓ No cycles: {len(store)} nodes can be ordered[/green]")


def main() -> None:
    app()
