"""Error taxonomy for sortjson."""

from __future__ import annotations

from dataclasses import dataclass


class SortJsonError(RuntimeError):
    """Base class for errors raised by sortjson."""


class JsonParseError(SortJsonError):
    """Raised when a document is not valid JSON after optional comment stripping."""


@dataclass(frozen=True)
class ConfigIssue:
    path: str
    message: str


class ConfigValidationError(SortJsonError):
    """Configuration document does not match the expected shape.

    Unlike a missing or unparseable config file, this error is fatal: the run
    is aborted before any file is processed.
    """

    def __init__(self, source: str, issues: list[ConfigIssue]):
        first = issues[0].message if issues else "unknown error"
        super().__init__(f"Invalid config in {source}: {first}")
        self.source = source
        self.issues = issues
