"""Detection and removal of `//` and `/* */` comments in JSON documents."""

from __future__ import annotations

from enum import StrEnum
import re

_STRING_LITERAL_RE = re.compile(r'"(?:[^"\\]|\\.)*"')
_COMMENT_MARKER_RE = re.compile(r"//|/\*")


class _ScanState(StrEnum):
    NORMAL = "normal"
    IN_STRING = "in_string"
    IN_LINE_COMMENT = "in_line_comment"
    IN_BLOCK_COMMENT = "in_block_comment"


def detect_jsonc(content: str) -> bool:
    """Heuristically report whether `content` carries comments.

    String literals are blanked first so `"https://example.com"` does not count
    as a line comment. This is not a lexer; odd escape sequences can still
    produce false positives.
    """
    without_strings = _STRING_LITERAL_RE.sub('""', content)
    return _COMMENT_MARKER_RE.search(without_strings) is not None


def strip_comments(content: str) -> str:
    """Remove comments from JSONC text. Destructive: comments are lost.

    Newlines that terminate line comments are kept so line numbers reported
    by a later parse still point at the original lines. Other JSONC
    extensions (trailing commas) are left alone.
    """
    out: list[str] = []
    state = _ScanState.NORMAL
    escaped = False
    index = 0
    length = len(content)
    while index < length:
        char = content[index]
        following = content[index + 1] if index + 1 < length else ""
        if state is _ScanState.IN_STRING:
            out.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                state = _ScanState.NORMAL
            index += 1
        elif state is _ScanState.IN_LINE_COMMENT:
            if char == "\n":
                state = _ScanState.NORMAL
                continue
            index += 1
        elif state is _ScanState.IN_BLOCK_COMMENT:
            if char == "*" and following == "/":
                state = _ScanState.NORMAL
                index += 2
            else:
                index += 1
        elif char == '"':
            state = _ScanState.IN_STRING
            out.append(char)
            index += 1
        elif char == "/" and following == "/":
            state = _ScanState.IN_LINE_COMMENT
            index += 2
        elif char == "/" and following == "*":
            state = _ScanState.IN_BLOCK_COMMENT
            index += 2
        else:
            out.append(char)
            index += 1
    return "".join(out)
