"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

Dimension: TypeAlias = Literal["tags", "authors", "directory", "severity", "types"]
ListingField: TypeAlias = Literal["author", "severity"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
