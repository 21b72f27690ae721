from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path
from typing import Mapping, Sequence

from pydantic import ValidationError

from sortjson.exceptions import ConfigIssue, ConfigValidationError
from sortjson.patterns import matches_pattern, pattern_specificity
from sortjson.runtime.file_system import FileSystem, LocalFileSystem
from sortjson.schema import FileConfig, SortJsonConfig

CONFIG_FILE_NAMES: tuple[str, ...] = (
    ".sortjsonrc.json",
    ".sortjsonrc",
    "sortjson.config.json",
)


@dataclass(frozen=True)
class LoadedConfig:
    source: str
    config: SortJsonConfig


@dataclass(frozen=True)
class FileConfigResult:
    sort_from: int
    ignore: bool = False
    sort_order: tuple[str, ...] | None = None
    matched_pattern: str | None = None


def default_config() -> SortJsonConfig:
    return SortJsonConfig()


_UNAVAILABLE = object()


def _read_candidate(fs: FileSystem, name: str) -> object:
    try:
        raw = fs.read_text(name)
    except (OSError, UnicodeError):
        return _UNAVAILABLE
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return _UNAVAILABLE


def _issues_from(exc: ValidationError) -> list[ConfigIssue]:
    issues: list[ConfigIssue] = []
    for error in exc.errors():
        location = "/".join(str(part) for part in error.get("loc", ()))
        message = str(error.get("msg", "invalid value"))
        if location:
            message = f"{location}: {message}"
        issues.append(ConfigIssue(path=location, message=message))
    return issues


def validate_config(payload: object, *, source: str) -> SortJsonConfig:
    try:
        return SortJsonConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigValidationError(source, _issues_from(exc)) from exc


def find_config(
    fs: FileSystem,
    names: Sequence[str] = CONFIG_FILE_NAMES,
) -> LoadedConfig | None:
    """Return the first candidate config that exists and parses.

    Missing, unreadable or non-JSON candidates are skipped. A candidate that
    parses but fails validation raises `ConfigValidationError`; it never
    falls through to the next name.
    """
    for name in names:
        payload = _read_candidate(fs, name)
        if payload is _UNAVAILABLE:
            continue
        return LoadedConfig(source=name, config=validate_config(payload, source=name))
    return None


def load_config(root: Path | None = None, fs: FileSystem | None = None) -> SortJsonConfig:
    if fs is None:
        fs = LocalFileSystem(root if root is not None else Path.cwd())
    loaded = find_config(fs)
    if loaded is None:
        return default_config()
    return loaded.config


def _best_match(path: str, files: Mapping[str, FileConfig]) -> tuple[str, FileConfig] | None:
    matches = [
        (pattern, file_config)
        for pattern, file_config in files.items()
        if matches_pattern(path, pattern)
    ]
    if not matches:
        return None
    # sorted() is stable: equal scores keep declaration order.
    ranked = sorted(matches, key=lambda item: -pattern_specificity(item[0]))
    return ranked[0]


def resolve_file_config(path: str, config: SortJsonConfig) -> FileConfigResult:
    """Effective settings for `path`; the most specific `files` pattern wins."""
    best = _best_match(path, config.files)
    if best is None:
        return FileConfigResult(sort_from=config.sort_from)
    pattern, file_config = best
    sort_from = file_config.sort_from
    return FileConfigResult(
        sort_from=sort_from if sort_from is not None else config.sort_from,
        ignore=file_config.ignore,
        sort_order=(
            tuple(file_config.sort_order)
            if file_config.sort_order is not None
            else None
        ),
        matched_pattern=pattern,
    )


def effective_sort_from(cli_value: int | None, resolved: FileConfigResult) -> int:
    if cli_value is not None:
        return cli_value
    return resolved.sort_from
