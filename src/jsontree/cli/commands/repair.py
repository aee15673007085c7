"""
Repair Command - Print the heuristically repaired text.
"""

import sys
from pathlib import Path

import click

from ...config import load_config
from ...parsing.recovery import parse_with_recovery
from ..utils import STDIN_MARKER, echo_error, echo_info, echo_success, echo_warning, read_input


@click.command()
@click.argument("source", default=STDIN_MARKER)
@click.option("-o", "--output", help="Write the repaired text here instead of stdout")
def repair(source: str, output: str | None):
    """
    Apply the bare-pair array repair to SOURCE.

    Exits with status 1 when the text is invalid and cannot be repaired.
    Valid input is echoed unchanged.
    """
    config = load_config()
    text = read_input(source, config.max_input_bytes)
    if text is None:
        sys.exit(1)

    result = parse_with_recovery(text)
    if result.is_err():
        echo_error(f"Invalid JSON: {result.unwrap_err().message}")
        sys.exit(1)

    outcome = result.unwrap()
    repaired = outcome.sanitized_text if outcome.was_sanitized else text

    if outcome.was_sanitized:
        echo_warning(f"Repaired {len(outcome.repairs)} span(s)", err=True)
        for span in outcome.repairs:
            echo_info(f"offset {span.start}: {span.original!r} -> {span.replacement}", err=True)
            if span.is_lossy:
                echo_info(f"  dropped duplicate keys: {', '.join(span.dropped_keys)}", err=True)
    else:
        echo_info("Input is already valid JSON", err=True)

    if output:
        Path(output).write_text(repaired, encoding="utf-8")
        echo_success(f"Wrote {output}", err=True)
    else:
        click.echo(repaired)
