"""
Generate Command - Build the node/edge graph for a JSON document.

Writes the generation as JSON for an external renderer, or prints it to
stdout in a status envelope with --json.
"""

import json
import logging
import sys
from pathlib import Path

import click

from ...config import load_config
from ...pipeline import SANITIZED_ADVISORY, generate as run_generate
from ...search.matcher import fit_view
from ..renderers import JsonRenderer
from ..utils import STDIN_MARKER, echo_error, echo_info, echo_success, echo_warning, read_input

logger = logging.getLogger(__name__)


@click.command()
@click.argument("source", default=STDIN_MARKER)
@click.option("-o", "--output", default="graph.json", help="Output file for the graph JSON")
@click.option("--write-back", is_flag=True, help="Adopt the repaired text by rewriting SOURCE")
@click.option("--json", "as_json", is_flag=True, help="Output graph data as JSON to stdout")
def generate(source: str, output: str, write_back: bool, as_json: bool):
    """
    Parse SOURCE (a file, or - for stdin) and build its graph.

    Strict JSON is tried first. Arrays written with bare "key": value pairs
    are repaired heuristically; the repair is reported but not fatal.
    """
    config = load_config()
    renderer = JsonRenderer("generate")

    text = read_input(source, config.max_input_bytes)
    if text is None:
        sys.exit(1)

    result = run_generate(text, config)

    if result.is_err():
        error = result.unwrap_err()
        if as_json:
            renderer.render_error(error, line=error.line, column=error.column)
        else:
            echo_error(f"Invalid JSON: {error.message}")
        sys.exit(1)

    outcome = result.unwrap()
    generation = outcome.generation

    if outcome.was_sanitized and write_back:
        if source == STDIN_MARKER:
            echo_warning("--write-back ignored for stdin input", err=True)
        else:
            Path(source).write_text(outcome.sanitized_text, encoding="utf-8")
            logger.debug(f"Wrote repaired text back to {source}")

    payload = generation.to_dict()
    payload["sanitized"] = outcome.was_sanitized
    payload["viewport"] = fit_view(config).model_dump(mode="json")

    if as_json:
        if outcome.was_sanitized:
            payload["advisory"] = SANITIZED_ADVISORY
        renderer.render_success(payload)
        return

    if outcome.was_sanitized:
        echo_warning(SANITIZED_ADVISORY)
        for repair in outcome.parse.repairs:
            if repair.is_lossy:
                echo_info(f"Collapsed duplicate keys at offset {repair.start}: {', '.join(repair.dropped_keys)}")
        if write_back and source != STDIN_MARKER:
            echo_info(f"Rewrote {source} with the repaired text")

    output_path = Path(output)
    output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    echo_success(f"Generated: {output_path}")
    click.echo(f"   Nodes: {generation.node_count}")
    click.echo(f"   Edges: {generation.edge_count}")
