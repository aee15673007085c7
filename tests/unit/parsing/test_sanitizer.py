"""
Unit tests for the bare-pair array sanitizer.
"""

import json

import pytest

from jsontree.parsing.sanitizer import (
    parse_pair,
    repair_span,
    repair_value,
    sanitize,
    sanitize_with_report,
    split_top_level,
    string_end,
)

SAMPLE_JSON = """{
  "user": {
    "id": 1,
    "name": "John Doe",
    "address": {
      "city": "New York",
      "country": "USA"
    }
  },
  "items": [
    "name": "item1",
    "name": "item2"
  ]
}"""


class TestSanitizeNoOp:
    """Valid JSON and non-qualifying spans must come back byte-identical."""

    @pytest.mark.parametrize("text", [
        '{"a": {"b": 1}}',
        "[1, 2, 3]",
        '[{"name": "x"}, {"name": "y"}]',
        '{"s": "[\\"a\\": 1]"}',
        '"just a string"',
        "  [ ]  ",
        '{"nested": [[1, 2], ["a", "b"]], "n": null}',
    ])
    def test_valid_json_unchanged(self, text):
        json.loads(text)
        assert sanitize(text) == text

    def test_mixed_segments_left_untouched(self):
        """One non-pair segment blocks the whole span."""
        text = '["a": 1, 2]'
        assert sanitize(text) == text

    def test_plain_strings_are_not_pairs(self):
        text = '["a", "b"]'
        assert sanitize(text) == text

    def test_unclosed_span_left_untouched(self):
        text = '["a": 1'
        assert sanitize(text) == text

    def test_mismatched_closer_left_untouched(self):
        text = '["a": 1}'
        assert sanitize(text) == text

    def test_stray_closer_preserved(self):
        text = '] ["a": 1'
        assert sanitize(text) == text

    def test_no_brackets_short_circuit(self):
        text = '{"a": oops}'
        assert sanitize(text) == text


class TestSanitizeRepairs:

    def test_duplicate_keys_collapse_to_last(self):
        assert sanitize('["name": "item1", "name": "item2"]') == '[{"name": "item2"}]'

    def test_distinct_keys_merge_into_one_object(self):
        assert sanitize('["a": 1, "b": 2]') == '[{"a": 1, "b": 2}]'

    def test_literals_kept(self):
        text = '["n": -1.5, "i": 42, "t": true, "f": false, "z": null]'
        assert sanitize(text) == '[{"n": -1.5, "i": 42, "t": true, "f": false, "z": null}]'

    def test_bare_words_are_quoted(self):
        assert sanitize('["a": hello world]') == '[{"a": "hello world"}]'

    def test_internal_quotes_escaped(self):
        repaired = sanitize('["a": say "hi"]')
        assert repaired == r'[{"a": "say \"hi\""}]'
        assert json.loads(repaired) == [{"a": 'say "hi"'}]

    def test_nested_object_value_kept(self):
        assert sanitize('["o": {"x": 1}]') == '[{"o": {"x": 1}}]'

    def test_innermost_span_repaired_first(self):
        assert sanitize('["outer": ["inner": 1]]') == '[{"outer": [{"inner": 1}]}]'

    def test_trailing_comma_ignored(self):
        assert sanitize('["a": 1,]') == '[{"a": 1}]'

    def test_only_qualifying_span_rewritten(self):
        text = '{"items": ["name": "item1", "name": "item2"], "ok": [1, 2]}'
        assert sanitize(text) == '{"items": [{"name": "item2"}], "ok": [1, 2]}'

    def test_sample_document(self):
        repaired = sanitize(SAMPLE_JSON)
        data = json.loads(repaired)
        assert data["items"] == [{"name": "item2"}]
        assert data["user"]["address"]["city"] == "New York"
        # Everything outside the span is untouched
        assert repaired.startswith(SAMPLE_JSON[:SAMPLE_JSON.index('"items"')])

    def test_report_describes_lossy_span(self):
        text = '{"items": ["name": "item1", "name": "item2"]}'
        repaired, repairs = sanitize_with_report(text)

        assert len(repairs) == 1
        span = repairs[0]
        assert span.original == '["name": "item1", "name": "item2"]'
        assert text[span.start:span.end] == span.original
        assert span.replacement == '[{"name": "item2"}]'
        assert span.dropped_keys == ["name"]
        assert span.is_lossy
        assert repaired == '{"items": [{"name": "item2"}]}'

    def test_report_empty_when_nothing_changes(self):
        _, repairs = sanitize_with_report("[1, 2]")
        assert repairs == []


class TestScannerPieces:

    def test_string_end_skips_escapes(self):
        text = '"ab\\"c" rest'
        assert string_end(text, 0) == 7

    def test_string_end_unterminated(self):
        assert string_end('"abc', 0) == 4

    def test_split_top_level_respects_strings_and_nesting(self):
        segments = split_top_level('"a,b": 1, "c": [1, 2], "d": {"e": 1, "f": 2}')
        assert [s.strip() for s in segments] == ['"a,b": 1', '"c": [1, 2]', '"d": {"e": 1, "f": 2}']

    def test_parse_pair(self):
        assert parse_pair('"key" : value') == ("key", "value")
        assert parse_pair('"k": "v"') == ("k", '"v"')

    @pytest.mark.parametrize("segment", [
        '"a"',
        'a: 1',
        '"": 1',
        '"a":',
        '"a" 1',
        '"unterminated: 1',
    ])
    def test_parse_pair_rejects(self, segment):
        assert parse_pair(segment) is None

    @pytest.mark.parametrize("value,expected", [
        ('"x"', '"x"'),
        ("12", "12"),
        ("3.25", "3.25"),
        ("-7", "-7"),
        ("null", "null"),
        ("[1]", "[1]"),
        ("{}", "{}"),
        ("True", '"True"'),
        ("1e5", '"1e5"'),
        ("abc", '"abc"'),
    ])
    def test_repair_value(self, value, expected):
        assert repair_value(value) == expected

    def test_repair_span(self):
        assert repair_span('"a": 1, "b": 2') == ('{"a": 1, "b": 2}', [])
        assert repair_span('"a": 1, "a": 2') == ('{"a": 2}', ["a"])

    @pytest.mark.parametrize("inner", ["", "   ", "1, 2", '"a": 1, "b"'])
    def test_repair_span_declines(self, inner):
        assert repair_span(inner) is None
