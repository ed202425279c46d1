"""ItemList JSON-LD API for ranked list pages."""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from packages.shared.errors import PayloadTooLargeError, ValidationError
from packages.shared.json_ld import (
    collect_ranked_items,
    count_nodes,
    item_list_ld,
    ranked_item_ld,
    script_tag,
)
from packages.shared.monitoring.logging import get_logger, log_with_context
from packages.shared.ranked_list import ContentNode, ItemRecord, RenderContext
from packages.shared.utils import chat_first_response, request_id_from_request

from config import settings

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Ranked List Schema"])


class ContentRequest(BaseModel):
    """Parsed page content and whether the page is a singular view."""

    blocks: List[ContentNode] = Field(default_factory=list, description="Parsed content blocks")
    is_singular: bool = Field(True, description="False for archive/listing views")


class RecordsRequest(BaseModel):
    """Ranked item attribute bags, already collected, in document order."""

    records: List[Dict[str, Any]] = Field(default_factory=list)
    is_singular: bool = True


def _render_context(is_singular: bool) -> RenderContext:
    return RenderContext(is_singular=is_singular, min_items=settings.min_items)


def _item_list_response(
    request: Request,
    records: List[Dict[str, Any]],
    is_singular: bool,
) -> Dict[str, Any]:
    request_id = request_id_from_request(request)
    document = item_list_ld(records, _render_context(is_singular))
    item_count = document["numberOfItems"] if document else 0
    log_with_context(
        logger,
        logging.INFO,
        "ItemList projected",
        request_id=request_id,
        record_count=len(records),
        item_count=item_count,
        emitted=document is not None,
    )
    return chat_first_response(
        {
            "emitted": document is not None,
            "record_count": len(records),
            "item_count": item_count,
        },
        machine_readable=document,
        request_id=request_id,
        script_tag=script_tag(document),
    )


@router.post("/item-list")
def item_list_from_content(request: Request, body: ContentRequest) -> Dict[str, Any]:
    """
    Collect ranked list blocks from the content tree and project them into an ItemList.
    machine_readable is {} and script_tag is "" when nothing should be emitted.
    """
    node_count = count_nodes(body.blocks)
    if node_count > settings.max_content_nodes:
        raise PayloadTooLargeError(
            "Content tree too large",
            limit=settings.max_content_nodes,
            details={"node_count": node_count},
        )
    records = collect_ranked_items(body.blocks, settings.block_name)
    return _item_list_response(request, records, body.is_singular)


@router.post("/item-list/records")
def item_list_from_records(request: Request, body: RecordsRequest) -> Dict[str, Any]:
    """Project already-collected attribute bags into an ItemList."""
    if len(body.records) > settings.max_content_nodes:
        raise PayloadTooLargeError("Too many records", limit=settings.max_content_nodes)
    return _item_list_response(request, body.records, body.is_singular)


@router.post("/item")
def single_item(request: Request, body: ItemRecord) -> Dict[str, Any]:
    """Schema.org object for one ranked item (no ListItem wrapper). A title is required."""
    if not body.title:
        raise ValidationError("title required", details={"field": "title"})
    item = ranked_item_ld(body)
    return chat_first_response(
        {"schema_type": item["@type"]},
        machine_readable={"@context": "https://schema.org", **item},
        request_id=request_id_from_request(request),
    )
