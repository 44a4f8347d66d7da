"""Shared type aliases for template-stats."""

from .common import Dimension, JsonObject, JsonScalar, JsonValue, ListingField

__all__ = ["Dimension", "JsonObject", "JsonScalar", "JsonValue", "ListingField"]
