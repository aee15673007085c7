"""
CLI Utilities - Shared helper functions for command line operations.

This module provides formatted printing and input loading used across the
jsontree commands.
"""

from pathlib import Path
from typing import Optional

import click

STDIN_MARKER = "-"


def echo_success(message: str, err: bool = False) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
        err (bool): Write to stderr instead of stdout.
    """
    click.echo(click.style(f"✅ {message}", fg="green"), err=err)


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str, err: bool = False) -> None:
    """
    Print a warning message with a yellow alert symbol.

    Args:
        message (str): The warning message to display.
        err (bool): Write to stderr instead of stdout.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"), err=err)


def echo_info(message: str, err: bool = False) -> None:
    """
    Print an informational message, dimmed.

    Args:
        message (str): The info message to display.
        err (bool): Write to stderr instead of stdout.
    """
    click.echo(click.style(f"   {message}", dim=True), err=err)


def read_input(source: str, max_bytes: int) -> Optional[str]:
    """
    Read the JSON text to visualize.

    Args:
        source (str): A file path, or "-" for stdin.
        max_bytes (int): Refuse inputs larger than this.

    Returns:
        Optional[str]: The text, or None if it could not be read (an error
        has already been printed).
    """
    if source == STDIN_MARKER:
        try:
            data = click.get_binary_stream("stdin").read(max_bytes + 1)
            if len(data) > max_bytes:
                echo_error(f"Input too large: more than {max_bytes} bytes")
                return None
            return data.decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            echo_error(f"Failed to read stdin: {e}")
            return None

    path = Path(source)
    if not path.exists():
        echo_error(f"Input file not found: {source}")
        return None
    if path.is_dir():
        echo_error(f"Input is a directory: {source}")
        return None

    size = path.stat().st_size
    if size > max_bytes:
        echo_error(f"Input too large: {size} bytes (limit {max_bytes})")
        return None

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        echo_error(f"Failed to read {source}: {e}")
        return None
