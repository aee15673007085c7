"""
Search Command - Locate a node by path query.
"""

import sys

import click
from rich.console import Console
from rich.table import Table

from ...config import load_config
from ...core.types import SearchResult
from ...pipeline import generate as run_generate
from ...search.matcher import search as run_search
from ..renderers import JsonRenderer
from ..utils import STDIN_MARKER, echo_error, echo_success, echo_warning, read_input

console = Console()


@click.command()
@click.argument("query")
@click.argument("source", default=STDIN_MARKER)
@click.option("--with-graph", is_flag=True, help="Include the highlighted graph in --json output")
@click.option("--json", "as_json", is_flag=True, help="Output result as JSON")
def search(query: str, source: str, with_graph: bool, as_json: bool):
    """
    Find the first node whose path ends with QUERY.

    \b
    Examples:
      jsontree search '$.user.address.city' data.json
      jsontree search 'items[0].name' data.json
    """
    config = load_config()
    renderer = JsonRenderer("search")

    text = read_input(source, config.max_input_bytes)
    if text is None:
        sys.exit(1)

    generated = run_generate(text, config)
    if generated.is_err():
        error = generated.unwrap_err()
        if as_json:
            renderer.render_error(error, line=error.line, column=error.column)
        else:
            echo_error(f"Invalid JSON: {error.message}")
        sys.exit(1)

    generation = generated.unwrap().generation
    result = run_search(generation, query, config)

    if as_json:
        data = {"result": result.model_dump(mode="json")}
        if with_graph:
            generation.highlight(result.node.id if result.found else None)
            data["graph"] = generation.to_dict()
        renderer.render_success(data)
        return

    if result.normalized is None:
        echo_warning("Empty query, nothing to search")
        return

    if not result.found:
        echo_warning(result.message)
        return

    echo_success(result.message)
    click.echo(f"   Path: {result.node.path}")
    _print_result(result)


def _print_result(result: SearchResult) -> None:
    node = result.node
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("id", node.id)
    table.add_row("kind", node.kind.value)
    table.add_row("label", node.label)
    table.add_row("position", f"({node.position.x}, {node.position.y})")
    if result.viewport is not None:
        table.add_row("center", f"({result.viewport.x}, {result.viewport.y}) zoom {result.viewport.zoom}")
    console.print(table)
