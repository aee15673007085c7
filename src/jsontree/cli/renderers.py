"""
JSON output envelope for machine consumers (renderers, editor plugins).

Every --json response has the shape:
    {"meta": {"command": ..., "status": "success"}, "data": {...}}
    {"meta": {"command": ..., "status": "error"}, "error": {"message": ..., "type": ...}}
"""

import json
from typing import Any, Dict

import click
from pydantic import BaseModel


class JsonRenderer:
    """Writes one JSON envelope to stdout."""

    def __init__(self, command: str):
        self.command = command

    def _meta(self, status: str) -> Dict[str, Any]:
        return {"command": self.command, "status": status}

    def render_success(self, data: BaseModel | Dict[str, Any]) -> None:
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json")
        click.echo(json.dumps({"meta": self._meta("success"), "data": data}, indent=2))

    def render_error(self, error: Exception | Any, **details: Any) -> None:
        payload = {
            "message": str(error),
            "type": type(error).__name__,
            **details,
        }
        click.echo(json.dumps({"meta": self._meta("error"), "error": payload}, indent=2))
