"""Serialize JSON-LD documents for embedding in page markup."""

import json
from typing import Any, Dict, Iterable, Optional

from .collector import Node, collect_ranked_items
from .ranked_list import PositionCounter, item_list_ld
from packages.shared.ranked_list.models import RANKED_LIST_BLOCK_NAME, RenderContext

SCRIPT_TYPE = "application/ld+json"


def to_json(document: Dict[str, Any]) -> str:
    """Compact JSON with slashes and non-ASCII characters left unescaped."""
    return json.dumps(document, ensure_ascii=False, separators=(",", ":"))


def script_tag(document: Optional[Dict[str, Any]]) -> str:
    """<script type="application/ld+json"> element for document, or "" if there is none."""
    if not document:
        return ""
    return f'<script type="{SCRIPT_TYPE}">{to_json(document)}</script>\n'


def render_schema(
    blocks: Iterable[Node],
    context: RenderContext,
    block_name: str = RANKED_LIST_BLOCK_NAME,
    positions: Optional[PositionCounter] = None,
) -> str:
    """Collect ranked items from a content tree and render their ItemList script tag."""
    records = collect_ranked_items(blocks, block_name)
    return script_tag(item_list_ld(records, context, positions))
