from __future__ import annotations

import json
import math
import re

from sortjson.exceptions import JsonParseError
from sortjson.json_types import JSONValue

NESTED_TOO_DEEPLY_MESSAGE = "Document is nested too deeply"

_LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def _escape_surrogate(match: re.Match[str]) -> str:
    return f"\\u{ord(match.group()):04x}"


def format_json(value: JSONValue, indent: int = 2, use_tabs: bool = False) -> str:
    """Pretty-print `value` with a single trailing newline.

    Key order is taken from the value as given; sorting is the caller's job.
    With `use_tabs` each level is indented by one tab and `indent` is ignored.
    Unpaired surrogates are written back as `\\uXXXX` escapes so the result
    can always be encoded as UTF-8.
    """
    if use_tabs:
        indent_text = "\t"
    else:
        if indent < 1:
            raise ValueError(f"indent must be positive, got {indent}")
        indent_text = " " * indent
    text = json.dumps(
        value,
        indent=indent_text,
        ensure_ascii=False,
        allow_nan=False,
        sort_keys=False,
    )
    # The decoder joins valid pairs, so any surrogate left here is unpaired.
    return _LONE_SURROGATE_RE.sub(_escape_surrogate, text) + "\n"


def _reject_constant(name: str) -> None:
    raise ValueError(f"Unexpected non-standard JSON constant {name}")


def _parse_finite_float(text: str) -> float:
    number = float(text)
    if math.isinf(number):
        raise ValueError(f"Number {text} is out of range")
    return number


def parse_json(text: str) -> JSONValue:
    try:
        return json.loads(
            text,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except RecursionError as exc:
        raise JsonParseError(NESTED_TOO_DEEPLY_MESSAGE) from exc
    except ValueError as exc:
        # json.JSONDecodeError is a ValueError subclass.
        raise JsonParseError(str(exc)) from exc
