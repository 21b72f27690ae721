"""The value space produced by the JSON decoder and accepted by the sorter."""

from __future__ import annotations

from typing import TypeAlias

JSONValue: TypeAlias = (
    str | int | float | bool | None | list["JSONValue"] | dict[str, "JSONValue"]
)
