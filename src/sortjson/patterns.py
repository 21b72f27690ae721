from __future__ import annotations

from functools import lru_cache
import re

_GLOB_CHARS_RE = re.compile(r"[*?\[\]]")
_LEADING_GLOBSTAR = "**/"


@lru_cache(maxsize=256)
def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Translate a path glob into an anchored regular expression.

    `**` crosses path separators, `*` and `?` stay inside one segment. A
    leading `**/` also matches zero directories, so `**/*.json` matches
    `bar.json` as well as `foo/bar.json`.
    """
    parts: list[str] = []
    body = pattern
    if body.startswith(_LEADING_GLOBSTAR):
        parts.append("(?:.*/)?")
        body = body[len(_LEADING_GLOBSTAR):]
    index = 0
    while index < len(body):
        if body.startswith("**", index):
            parts.append(".*")
            index += 2
            continue
        char = body[index]
        if char == "*":
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        else:
            parts.append(re.escape(char))
        index += 1
    return re.compile("^" + "".join(parts) + "$")


def matches_pattern(path: str, pattern: str) -> bool:
    if path == pattern:
        return True
    return any(
        glob_to_regex(alternative).match(path) is not None
        for alternative in expand_braces(pattern)
    )


def pattern_specificity(pattern: str) -> int:
    """Score a pattern so that exact and deep patterns beat broad globstars."""
    score = 0
    if "*" not in pattern:
        score += 1000
    score += pattern.count("/") * 10
    double_star_count = pattern.count("**")
    single_star_count = pattern.count("*") - double_star_count * 2
    score -= double_star_count * 5
    score += single_star_count
    score += len(pattern)
    return score


def is_glob_pattern(text: str) -> bool:
    return _GLOB_CHARS_RE.search(text) is not None


def _split_alternatives(body: str) -> list[str]:
    options: list[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(body):
        if char == "{":
            depth += 1
        elif char == "}" and depth:
            depth -= 1
        elif char == "," and depth == 0:
            options.append(body[start:index])
            start = index + 1
    options.append(body[start:])
    return options


def expand_braces(pattern: str) -> list[str]:
    """Expand `{a,b}` alternatives, nested groups included.

    A group without a top-level comma is kept literally.
    """
    depth = 0
    start = 0
    for index, char in enumerate(pattern):
        if char == "{":
            if depth == 0:
                start = index
            depth += 1
        elif char == "}" and depth:
            depth -= 1
            if depth:
                continue
            options = _split_alternatives(pattern[start + 1 : index])
            if len(options) < 2:
                continue
            prefix, suffix = pattern[:start], pattern[index + 1 :]
            expanded: list[str] = []
            for option in options:
                expanded.extend(expand_braces(prefix + option + suffix))
            return list(dict.fromkeys(expanded))
    return [pattern]
