"""
Heuristic repair of arrays written with bare key/value pairs.

A common hand-editing mistake is forgetting the braces around object
literals inside an array:

    "items": [ "name": "item1", "name": "item2" ]

The scanner below walks the text once, tracking strings and bracket depth,
and looks at every balanced [...] span. A span is rewritten only when every
non-empty top-level segment has the shape `"key": value`; a single
non-matching segment leaves the whole span untouched. A qualifying span
becomes one array holding ONE object that merges all of its pairs.

The merge is lossy: repeated keys collapse to their last value, so
`["name": "a", "name": "b"]` becomes `[{"name": "b"}]`.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

OPENERS = {"[": "]", "{": "}"}
CLOSERS = {"]", "}"}
SPECIAL_CHARS = frozenset('"[]{}')

LITERAL_RE = re.compile(r"-?\d+(?:\.\d+)?|true|false|null")


@dataclass
class SpanRepair:
    """One rewritten array span, with offsets into the original text."""
    start: int
    end: int
    original: str
    replacement: str
    dropped_keys: List[str] = field(default_factory=list)

    @property
    def is_lossy(self) -> bool:
        return bool(self.dropped_keys)


@dataclass
class _Frame:
    opener: Optional[str]
    start: int
    parts: List[str] = field(default_factory=list)


def sanitize(text: str) -> str:
    """
    Rewrite every qualifying bare-pair array span in text.

    Returns text unchanged when nothing qualifies, which is always the case
    for strictly valid JSON.
    """
    rewritten, _ = sanitize_with_report(text)
    return rewritten


def sanitize_with_report(text: str) -> Tuple[str, List[SpanRepair]]:
    """Same as sanitize(), also returning the list of spans that were rewritten."""
    if "[" not in text:
        return text, []

    repairs: List[SpanRepair] = []
    frames: List[_Frame] = [_Frame(opener=None, start=0)]
    n = len(text)
    i = 0

    while i < n:
        ch = text[i]

        if ch == '"':
            end = string_end(text, i)
            frames[-1].parts.append(text[i:end])
            i = end
            continue

        if ch in OPENERS:
            frames.append(_Frame(opener=ch, start=i))
            i += 1
            continue

        if ch in CLOSERS:
            frame = frames[-1]
            if frame.opener is None:
                # Stray closer at top level
                frame.parts.append(ch)
                i += 1
                continue
            frames.pop()
            if OPENERS[frame.opener] != ch:
                # Mismatched closer: emit the open span verbatim and let the
                # enclosing frame deal with this character.
                frames[-1].parts.append(frame.opener + "".join(frame.parts))
                continue
            inner = "".join(frame.parts)
            if frame.opener == "[":
                repaired = _repair_frame(text, frame, i + 1, inner, repairs)
                if repaired is not None:
                    inner = repaired
            frames[-1].parts.append(frame.opener + inner + ch)
            i += 1
            continue

        j = i + 1
        while j < n and text[j] not in SPECIAL_CHARS:
            j += 1
        frames[-1].parts.append(text[i:j])
        i = j

    # Unclosed spans at end of input are never repaired
    while len(frames) > 1:
        frame = frames.pop()
        frames[-1].parts.append(frame.opener + "".join(frame.parts))

    rewritten = "".join(frames[0].parts)
    if repairs:
        logger.debug(f"Sanitizer rewrote {len(repairs)} span(s)")
    return rewritten, repairs


def _repair_frame(
    text: str, frame: _Frame, end: int, inner: str, repairs: List[SpanRepair]
) -> Optional[str]:
    result = repair_span(inner)
    if result is None:
        return None
    replacement, dropped = result
    if dropped:
        logger.warning(
            f"Lossy repair at offset {frame.start}: duplicate keys collapsed to last value: "
            f"{', '.join(sorted(set(dropped)))}"
        )
    repairs.append(SpanRepair(
        start=frame.start,
        end=end,
        original=text[frame.start:end],
        replacement="[" + replacement + "]",
        dropped_keys=dropped,
    ))
    return replacement


def repair_span(inner: str) -> Optional[Tuple[str, List[str]]]:
    """
    Decide whether the contents of one [...] span qualify for repair.

    Returns (object_literal, dropped_keys) when every segment is a
    `"key": value` pair, or None to leave the span alone.
    """
    segments = [segment.strip() for segment in split_top_level(inner)]
    segments = [segment for segment in segments if segment]
    if not segments:
        return None

    pairs = []
    for segment in segments:
        pair = parse_pair(segment)
        if pair is None:
            return None
        pairs.append(pair)

    merged = {}
    dropped: List[str] = []
    for key, value in pairs:
        if key in merged:
            dropped.append(key)
        merged[key] = repair_value(value)

    body = ", ".join(
        f"{json.dumps(key, ensure_ascii=False)}: {value}" for key, value in merged.items()
    )
    return "{" + body + "}", dropped


def parse_pair(segment: str) -> Optional[Tuple[str, str]]:
    """Split `"key": value` into (key, raw value text), or None if it isn't one."""
    if not segment.startswith('"'):
        return None
    key_end = string_end(segment, 0)
    if key_end < 2 or segment[key_end - 1] != '"':
        return None
    try:
        key = json.loads(segment[:key_end])
    except json.JSONDecodeError:
        return None
    if not key:
        return None

    rest = segment[key_end:].lstrip()
    if not rest.startswith(":"):
        return None
    value = rest[1:].strip()
    if not value:
        return None
    return key, value


def repair_value(value: str) -> str:
    """
    Keep quoted strings, number/boolean/null literals and nested
    objects/arrays as they are; quote anything else as a JSON string.
    """
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value
    if LITERAL_RE.fullmatch(value):
        return value
    if value.startswith(("{", "[")):
        return value
    return json.dumps(value, ensure_ascii=False)


def split_top_level(inner: str) -> List[str]:
    """Split on commas that are outside strings and nested brackets."""
    segments = []
    depth = 0
    start = 0
    i = 0
    n = len(inner)
    while i < n:
        ch = inner[i]
        if ch == '"':
            i = string_end(inner, i)
            continue
        if ch in OPENERS:
            depth += 1
        elif ch in CLOSERS:
            depth = max(depth - 1, 0)
        elif ch == "," and depth == 0:
            segments.append(inner[start:i])
            start = i + 1
        i += 1
    segments.append(inner[start:])
    return segments


def string_end(text: str, start: int) -> int:
    """
    Index just past the string literal opening at text[start].

    Backslash escapes are skipped. An unterminated string runs to the end.
    """
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == '"':
            return i + 1
        i += 1
    return n
