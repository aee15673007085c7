"""
Core type definitions for jsontree.

Nodes and edges are the contract with the external renderer: every node
carries enough (path, value, kind, label, position) to draw a box, and every
edge names its two endpoints.
"""

from enum import StrEnum
from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from ..config import FIT_VIEW_PADDING, KIND_COLORS, SEARCH_ZOOM
from .values import JsonArray, JsonObject, JsonPrimitive, JsonValue, from_python


class NodeKind(StrEnum):
    """Shape of the JSON value behind a node."""
    OBJECT = "object"
    ARRAY = "array"
    PRIMITIVE = "primitive"

    @property
    def color(self) -> str:
        """Minimap fill color for this kind."""
        return KIND_COLORS[self.value]


class Position(BaseModel):
    """Top-left corner of a node box in graph coordinates."""
    x: int = 0
    y: int = 0

    model_config = ConfigDict(frozen=True)


class GraphNode(BaseModel):
    """
    One node per JSON value in a generation.

    `highlighted` is a rendering attribute only; the transformer always
    emits False and only the search highlight helpers change it.
    """
    id: str
    path: str
    # Any at the schema level; the validator below pins it to the value model.
    value: Any
    kind: NodeKind
    label: str
    position: Position
    depth: int = 0
    parent_id: str | None = None
    highlighted: bool = False

    model_config = ConfigDict(frozen=False, extra="ignore")

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: Any) -> JsonValue:
        if isinstance(value, (JsonObject, JsonArray, JsonPrimitive)):
            return value
        return from_python(value)

    @field_serializer("value")
    def _serialize_value(self, value: JsonValue) -> Any:
        return value.to_python()

    @property
    def color(self) -> str:
        return self.kind.color

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump(mode="json")
        data["color"] = self.color
        return data

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, GraphNode):
            return self.id == other.id
        return False


class GraphEdge(BaseModel):
    """Directed parent -> child relationship."""
    id: str
    source: str
    target: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def between(cls, source: str, target: str) -> "GraphEdge":
        return cls(id=f"e_{source}_{target}", source=source, target=target)


class ViewportInstruction(BaseModel):
    """
    Best-effort camera hint for the renderer.

    The renderer tries `action` first; if it cannot center on a point it
    performs `fallback` (fit the whole graph) instead.
    """
    action: Literal["center", "fit_view"]
    x: float | None = None
    y: float | None = None
    zoom: float | None = SEARCH_ZOOM
    padding: float = FIT_VIEW_PADDING
    fallback: Literal["fit_view"] | None = "fit_view"


class SearchResult(BaseModel):
    """
    Outcome of a path query.

    `found=False` is a normal answer, not an error.
    """
    query: str
    normalized: str | None = None
    found: bool = False
    node: GraphNode | None = None
    viewport: ViewportInstruction | None = None

    @property
    def message(self) -> str:
        return "Match found" if self.found else "No match found"
