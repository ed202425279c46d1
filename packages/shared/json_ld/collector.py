"""Collect ranked list block attributes from a parsed content tree."""

from typing import Any, Dict, Iterable, List, Mapping, Union

from packages.shared.ranked_list.models import RANKED_LIST_BLOCK_NAME, ContentNode

Node = Union[ContentNode, Mapping[str, Any]]


def _parts(node: Node):
    if isinstance(node, ContentNode):
        return node.block_name, node.attrs, node.inner_blocks
    return node.get("blockName"), node.get("attrs"), node.get("innerBlocks")


def collect_ranked_items(
    blocks: Iterable[Node],
    block_name: str = RANKED_LIST_BLOCK_NAME,
) -> List[Dict[str, Any]]:
    """
    Attribute bags of every block named block_name, in document order.
    Depth-first pre-order: a matching block comes before anything nested in it.
    """
    items: List[Dict[str, Any]] = []
    for block in blocks or []:
        name, attrs, inner = _parts(block)
        if name == block_name:
            items.append(dict(attrs or {}))
        if inner:
            items.extend(collect_ranked_items(inner, block_name))
    return items


def count_nodes(blocks: Iterable[Node]) -> int:
    """Total number of nodes in the tree, nested blocks included."""
    total = 0
    for block in blocks or []:
        _, _, inner = _parts(block)
        total += 1 + (count_nodes(inner) if inner else 0)
    return total
