from __future__ import annotations

import pytest

from sortjson.exceptions import JsonParseError
from sortjson.formatting import format_json, parse_json


def test_format_json_defaults_to_two_spaces() -> None:
    assert format_json({"a": 1}) == '{\n  "a": 1\n}\n'


def test_format_json_custom_indent() -> None:
    assert format_json({"a": 1}, indent=4) == '{\n    "a": 1\n}\n'


def test_format_json_tabs_override_indent() -> None:
    assert format_json({"a": 1}, use_tabs=True) == '{\n\t"a": 1\n}\n'
    assert format_json({"a": [1]}, indent=8, use_tabs=True) == '{\n\t"a": [\n\t\t1\n\t]\n}\n'


def test_format_json_always_ends_with_single_newline() -> None:
    assert format_json({}) == "{}\n"
    assert format_json([]) == "[]\n"
    assert format_json("string") == '"string"\n'
    assert format_json(3) == "3\n"
    assert format_json(True) == "true\n"
    assert format_json(None) == "null\n"


def test_format_json_keeps_iteration_order_and_unicode() -> None:
    assert format_json({"z": "é", "a": 1}) == '{\n  "z": "é",\n  "a": 1\n}\n'


def test_format_json_rejects_non_positive_indent() -> None:
    with pytest.raises(ValueError):
        format_json({"a": 1}, indent=0)


def test_parse_json_round_trips_values() -> None:
    assert parse_json('{"b": [1, 2.5, null, true], "a": "x"}') == {
        "b": [1, 2.5, None, True],
        "a": "x",
    }


@pytest.mark.parametrize(
    "text",
    ["{ invalid json }", "", '{"a": NaN}', "[Infinity]", '{"x": 1e400}', "[-1e400]"],
)
def test_parse_json_raises_parse_error(text: str) -> None:
    with pytest.raises(JsonParseError):
        parse_json(text)


def test_parse_json_keeps_large_finite_numbers() -> None:
    assert parse_json('{"x": 1e308, "y": 123456789012345678901234567890}') == {
        "x": 1e308,
        "y": 123456789012345678901234567890,
    }


def test_parse_json_reports_deep_nesting_as_parse_error() -> None:
    depth = 100_000
    with pytest.raises(JsonParseError, match="nested too deeply"):
        parse_json("[" * depth + "]" * depth)


def test_format_json_escapes_unpaired_surrogates() -> None:
    text = format_json(parse_json('{"b": "\\ud800", "c": "\\ud83d\\ude00"}'))
    assert text == '{\n  "b": "\\ud800",\n  "c": "\U0001f600"\n}\n'
    text.encode("utf-8")
    assert parse_json(text) == {"b": "\ud800", "c": "\U0001f600"}
