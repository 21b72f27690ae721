from __future__ import annotations

from typing import Iterable, Sequence

from sortjson.patterns import expand_braces, is_glob_pattern, matches_pattern
from sortjson.runtime.file_system import FileSystem

GITIGNORE_NAME = ".gitignore"
_GLOBSTAR_SUFFIX = "/**"


def gitignore_to_globs(text: str) -> list[str]:
    """Convert `.gitignore` lines into ignore globs.

    Negations are not supported and are dropped.
    """
    globs: list[str] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or line.startswith("!"):
            continue
        line = line.rstrip("/")
        if not line:
            continue
        if line.startswith("/"):
            globs.append(line[1:] + _GLOBSTAR_SUFFIX)
        elif "/" not in line:
            globs.append("**/" + line + _GLOBSTAR_SUFFIX)
        else:
            globs.append(line + _GLOBSTAR_SUFFIX)
    return globs


def read_gitignore(fs: FileSystem) -> list[str]:
    try:
        text = fs.read_text(GITIGNORE_NAME)
    except (OSError, UnicodeError):
        return []
    return gitignore_to_globs(text)


def is_ignored(path: str, ignore_patterns: Iterable[str]) -> bool:
    for pattern in ignore_patterns:
        if matches_pattern(path, pattern):
            return True
        if pattern.endswith(_GLOBSTAR_SUFFIX):
            prefix = pattern[: -len(_GLOBSTAR_SUFFIX)]
            if not is_glob_pattern(prefix) and path.startswith(prefix + "/"):
                return True
    return False


def expand_globs(
    fs: FileSystem,
    patterns: Sequence[str],
    *,
    ignore: Sequence[str] = (),
    respect_gitignore: bool = True,
) -> list[str]:
    """Expand file arguments into a sorted, de-duplicated list of paths.

    Plain paths are passed through even when they do not exist, so a typo
    surfaces as a per-file error. `{a,b}` groups are expanded first, and a
    plain path produced that way is kept only when it exists. Only glob
    matches are filtered by the ignore patterns.
    """
    ignore_patterns = list(ignore)
    if respect_gitignore:
        ignore_patterns.extend(read_gitignore(fs))
    results: set[str] = set()
    for pattern in patterns:
        alternatives = expand_braces(pattern)
        braced = len(alternatives) > 1
        for alternative in alternatives:
            if not is_glob_pattern(alternative):
                if not braced or fs.exists(alternative):
                    results.add(alternative)
                continue
            for path in fs.glob(alternative):
                if not is_ignored(path, ignore_patterns):
                    results.add(path)
    return sorted(results)
