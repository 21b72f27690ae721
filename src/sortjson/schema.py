from __future__ import annotations

from types import MappingProxyType
from typing import Annotated, Mapping, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
)

JSON_SCHEMA_DRAFT = "http://json-schema.org/draft-07/schema#"
DEFAULT_INCLUDE = ("**/*.json",)
DEFAULT_SORT_FROM = 1

Depth = Annotated[StrictInt, Field(ge=0)]


def _reject_null(value: object) -> object:
    # Optional fields may be omitted, but an explicit null is not a valid value.
    if value is None:
        raise ValueError("null is not allowed; omit the key instead")
    return value


class FileConfig(BaseModel):
    """Per-pattern override entry of the `files` table."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    sort_from: Optional[Depth] = Field(
        default=None,
        alias="sortFrom",
        description="Depth to start sorting from for this file pattern",
    )
    ignore: StrictBool = Field(
        default=False,
        description="Whether to ignore files matching this pattern",
    )
    sort_order: Optional[Tuple[StrictStr, ...]] = Field(
        default=None,
        alias="sortOrder",
        description="Keys placed first, in this order, when the root mapping is sorted",
    )

    @field_validator("sort_from", "sort_order", mode="before")
    @classmethod
    def _not_null(cls, value: object) -> object:
        return _reject_null(value)


class SortJsonConfig(BaseModel):
    """sort-json configuration file."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        title="sort-json configuration",
    )

    schema_url: Optional[StrictStr] = Field(
        default=None,
        alias="$schema",
        description="JSON Schema URL",
    )
    include: Tuple[StrictStr, ...] = Field(
        default=DEFAULT_INCLUDE,
        description="Glob patterns for files to include",
    )
    ignore: Tuple[StrictStr, ...] = Field(
        default=(),
        description="Glob patterns for files to ignore",
    )
    sort_from: Depth = Field(
        default=DEFAULT_SORT_FROM,
        alias="sortFrom",
        description="Depth to start sorting from (0 = root, 1 = first level children, etc.)",
    )
    files: Mapping[str, FileConfig] = Field(
        default_factory=lambda: MappingProxyType({}),
        description="Per-file configuration overrides (glob pattern -> config)",
    )

    @field_validator("schema_url", mode="before")
    @classmethod
    def _not_null(cls, value: object) -> object:
        return _reject_null(value)

    @field_validator("files", mode="after")
    @classmethod
    def _freeze_files(cls, value: Mapping[str, FileConfig]) -> Mapping[str, FileConfig]:
        return MappingProxyType(dict(value))


def config_json_schema() -> dict[str, object]:
    schema = SortJsonConfig.model_json_schema(by_alias=True)
    return {"$schema": JSON_SCHEMA_DRAFT, **schema}
