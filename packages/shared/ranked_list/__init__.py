"""Ranked list (listicle) block models and attribute parsing."""

from .models import (
    DEFAULT_CURRENCY,
    DEFAULT_SCHEMA_TYPE,
    MIN_LIST_ITEMS,
    RANKED_LIST_BLOCK_NAME,
    ContentNode,
    ItemRecord,
    RenderContext,
    SchemaGroup,
    SchemaType,
    group_for,
)
from .numbers import parse_count, parse_number

__all__ = [
    "DEFAULT_CURRENCY",
    "DEFAULT_SCHEMA_TYPE",
    "MIN_LIST_ITEMS",
    "RANKED_LIST_BLOCK_NAME",
    "ContentNode",
    "ItemRecord",
    "RenderContext",
    "SchemaGroup",
    "SchemaType",
    "group_for",
    "parse_count",
    "parse_number",
]
