"""Schema.org JSON-LD for ranked list (listicle) pages."""

from .collector import collect_ranked_items, count_nodes
from .ranked_list import (
    PositionCounter,
    add_aggregate_rating,
    item_list_ld,
    list_item_ld,
    ranked_item_ld,
)
from .serialize import render_schema, script_tag, to_json

__all__ = [
    "collect_ranked_items",
    "count_nodes",
    "PositionCounter",
    "add_aggregate_rating",
    "item_list_ld",
    "list_item_ld",
    "ranked_item_ld",
    "render_schema",
    "script_tag",
    "to_json",
]
