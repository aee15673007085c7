"""
Value Model.

A closed set of variants describing a parsed JSON document:

- JsonObject: ordered mapping of member name to value
- JsonArray: ordered sequence of values
- JsonPrimitive: string, number, boolean or null

The parser produces these and the graph transformer consumes them read-only.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

Scalar = Union[str, int, float, bool, None]


@dataclass(frozen=True)
class JsonObject:
    """JSON object. Member order is insertion order."""
    members: Dict[str, "JsonValue"] = field(default_factory=dict)

    def to_python(self) -> Dict[str, Any]:
        return {key: value.to_python() for key, value in self.members.items()}


@dataclass(frozen=True)
class JsonArray:
    """JSON array."""
    items: List["JsonValue"] = field(default_factory=list)

    def to_python(self) -> List[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class JsonPrimitive:
    """JSON string, number, boolean or null."""
    value: Scalar = None

    def to_python(self) -> Scalar:
        return self.value

    def as_text(self) -> str:
        """
        Render the value the way a JavaScript front-end would via String().

        Booleans and null are lowercase, integral floats drop the trailing
        ".0", and strings are shown without quotes.
        """
        value = self.value
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float):
            if math.isnan(value):
                return "NaN"
            if math.isinf(value):
                return "Infinity" if value > 0 else "-Infinity"
            if value.is_integer() and abs(value) < 1e21:
                return str(int(value))
            return repr(value)
        return str(value)


JsonValue = Union[JsonObject, JsonArray, JsonPrimitive]


def from_python(obj: Any) -> JsonValue:
    """
    Convert the output of json.loads into the value model.

    Raises:
        TypeError: if obj contains something that is not a JSON type.
    """
    # Explicit stack so deep documents don't hit the recursion limit.
    # Containers are placed before their children are filled in, and
    # children are popped in document order, so member order is preserved.
    root_slot: List[JsonValue] = []
    stack: List[tuple] = [(obj, root_slot, None)]

    while stack:
        current, parent_slot, key = stack.pop()
        if isinstance(current, dict):
            members: Dict[str, JsonValue] = {}
            _place(JsonObject(members), parent_slot, key)
            for member_key in reversed(list(current)):
                stack.append((current[member_key], members, member_key))
        elif isinstance(current, list):
            items: List[JsonValue] = [JsonPrimitive(None)] * len(current)
            _place(JsonArray(items), parent_slot, key)
            for index in range(len(current) - 1, -1, -1):
                stack.append((current[index], items, index))
        elif current is None or isinstance(current, (str, int, float, bool)):
            _place(JsonPrimitive(current), parent_slot, key)
        else:
            raise TypeError(f"Not a JSON value: {type(current).__name__}")

    return root_slot[0]


def _place(value: JsonValue, slot: Any, key: Any) -> None:
    if key is None:
        slot.append(value)
    else:
        slot[key] = value
