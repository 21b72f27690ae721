"""Per-file sort/check pipeline and run-level aggregation."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Iterator, Sequence

from sortjson.comments import detect_jsonc, strip_comments
from sortjson.config import effective_sort_from, resolve_file_config
from sortjson.exceptions import JsonParseError
from sortjson.formatting import NESTED_TOO_DEEPLY_MESSAGE, format_json, parse_json
from sortjson.runtime.file_system import FileSystem
from sortjson.schema import SortJsonConfig
from sortjson.sort import sort_keys_from_depth

JSONC_SKIPPED_MESSAGE = "JSONC detected. Use --force to process (comments will be lost)"
NOT_SORTED_MESSAGE = "Keys are not sorted"


class FileStatus(StrEnum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    ERROR = "error"
    CHANGED = "changed"


@dataclass(frozen=True)
class RunOptions:
    """Run-wide settings, built once from the command line."""

    check: bool = False
    write: bool = True
    force: bool = False
    indent: int = 2
    tabs: bool = False
    sort_from: int | None = None
    ignore: tuple[str, ...] = ()
    respect_gitignore: bool = True


@dataclass(frozen=True)
class ProcessOptions:
    check: bool
    write: bool
    force: bool
    indent: int
    tabs: bool
    sort_from: int
    sort_order: tuple[str, ...] | None = None


@dataclass(frozen=True)
class FileResult:
    path: str
    status: FileStatus
    message: str | None = None
    sort_from: int | None = None
    matched_pattern: str | None = None


@dataclass
class RunSummary:
    results: list[FileResult] = field(default_factory=list)

    def add(self, result: FileResult) -> None:
        self.results.append(result)

    @property
    def counts(self) -> Counter[FileStatus]:
        return Counter(result.status for result in self.results)

    @property
    def failed(self) -> bool:
        counts = self.counts
        return counts[FileStatus.ERROR] > 0 or counts[FileStatus.CHANGED] > 0

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0

    def describe(self) -> str:
        counts = self.counts
        parts: list[str] = []
        if counts[FileStatus.SUCCESS]:
            parts.append(f"{counts[FileStatus.SUCCESS]} sorted")
        if counts[FileStatus.SKIPPED]:
            parts.append(f"{counts[FileStatus.SKIPPED]} skipped")
        errors = counts[FileStatus.ERROR]
        if errors:
            parts.append(f"{errors} error{'s' if errors > 1 else ''}")
        if counts[FileStatus.CHANGED]:
            parts.append(f"{counts[FileStatus.CHANGED]} not sorted")
        return ", ".join(parts)


def process_text(content: str, options: ProcessOptions) -> tuple[FileStatus, str | None, str | None]:
    """Sort one document held in memory.

    Returns the status, an optional message, and the text to write (None when
    nothing should be written).
    """
    has_comments = detect_jsonc(content)
    if has_comments and not options.force:
        return FileStatus.SKIPPED, JSONC_SKIPPED_MESSAGE, None
    try:
        parsed = parse_json(strip_comments(content) if has_comments else content)
    except JsonParseError as exc:
        return FileStatus.ERROR, f"Parse error: {exc}", None
    try:
        sorted_value = sort_keys_from_depth(parsed, options.sort_from, options.sort_order)
        formatted = format_json(sorted_value, indent=options.indent, use_tabs=options.tabs)
        original = (
            format_json(parsed, indent=options.indent, use_tabs=options.tabs)
            if options.check
            else None
        )
    except RecursionError:
        return FileStatus.ERROR, NESTED_TOO_DEEPLY_MESSAGE, None
    if original is not None:
        # Both sides use the same formatting, so only key order is compared.
        if formatted != original:
            return FileStatus.CHANGED, NOT_SORTED_MESSAGE, None
        return FileStatus.SUCCESS, None, None
    if options.write and formatted != content:
        return FileStatus.SUCCESS, None, formatted
    return FileStatus.SUCCESS, None, None


def process_file(fs: FileSystem, path: str, options: ProcessOptions) -> FileResult:
    def _result(status: FileStatus, message: str | None = None) -> FileResult:
        return FileResult(
            path=path,
            status=status,
            message=message,
            sort_from=options.sort_from,
        )

    try:
        content = fs.read_text(path)
    except (OSError, UnicodeError) as exc:
        return _result(FileStatus.ERROR, str(exc))
    status, message, output = process_text(content, options)
    if output is not None:
        try:
            fs.write_text(path, output)
        except (OSError, UnicodeError) as exc:
            return _result(FileStatus.ERROR, str(exc))
    return _result(status, message)


def iter_results(
    fs: FileSystem,
    files: Sequence[str],
    config: SortJsonConfig,
    options: RunOptions,
) -> Iterator[FileResult]:
    """Process `files` in order, yielding one result per non-ignored file."""
    for path in files:
        resolved = resolve_file_config(path, config)
        if resolved.ignore:
            continue
        process_options = ProcessOptions(
            check=options.check,
            write=options.write and not options.check,
            force=options.force,
            indent=options.indent,
            tabs=options.tabs,
            sort_from=effective_sort_from(options.sort_from, resolved),
            sort_order=resolved.sort_order,
        )
        result = process_file(fs, path, process_options)
        yield replace(result, matched_pattern=resolved.matched_pattern)
