"""Schema.org JSON-LD for ranked list (listicle) items and their ItemList."""

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from packages.shared.monitoring.logging import get_logger
from packages.shared.ranked_list.models import (
    ItemRecord,
    RenderContext,
    SchemaGroup,
    SchemaType,
    group_for,
)
from packages.shared.ranked_list.numbers import parse_count, parse_number

logger = get_logger(__name__)

Record = Union[ItemRecord, Mapping[str, Any]]

BEST_RATING = 5
WORST_RATING = 0
ITEM_LIST_ORDER = "Descending"


class PositionCounter:
    """
    List position for one render pass. Starts at zero; call reset() before reusing
    it for another pass. Not shared between passes.
    """

    def __init__(self) -> None:
        self.value = 0

    def next(self) -> int:
        self.value += 1
        return self.value

    def reset(self) -> None:
        self.value = 0


def _record(record: Record) -> ItemRecord:
    if isinstance(record, ItemRecord):
        return record
    return ItemRecord.model_validate(dict(record or {}))


def _person(name: str) -> Dict[str, Any]:
    return {"@type": "Person", "name": name}


def _one_or_many(values: List[str]) -> Union[str, List[str]]:
    return values[0] if len(values) == 1 else values


def _add_platform(item: Dict[str, Any], record: ItemRecord) -> None:
    # Thing has no "logo": hero and logo both go to image.
    item["@type"] = "Thing"
    if record.subtitle:
        item["disambiguatingDescription"] = record.subtitle
    images = [url for url in (record.hero_image_url, record.image_url) if url]
    if images:
        item["image"] = _one_or_many(images)
    if record.alternate_name:
        item["alternateName"] = record.alternate_name
    if record.same_as:
        urls = [u.strip() for u in record.same_as.split(",")]
        urls = [u for u in urls if u]
        if urls:
            item["sameAs"] = _one_or_many(urls)


def _add_product(item: Dict[str, Any], record: ItemRecord) -> None:
    price = parse_number(record.price)
    if price is not None:
        item["offers"] = {
            "@type": "Offer",
            "price": price,
            "priceCurrency": record.resolved_currency,
        }


def _add_place(item: Dict[str, Any], record: ItemRecord) -> None:
    if record.address:
        item["address"] = {"@type": "PostalAddress", "streetAddress": record.address}
    if record.telephone:
        item["telephone"] = record.telephone


def _add_creative(item: Dict[str, Any], record: ItemRecord) -> None:
    if record.author:
        item["author"] = _person(record.author)
    if record.date_published:
        item["datePublished"] = record.date_published


def _add_podcast(item: Dict[str, Any], record: ItemRecord) -> None:
    """Hero image is preferred as cover art; datePublished only applies to episodes."""
    if record.hero_image_url:
        item["image"] = record.hero_image_url
    elif record.image_url and not item.get("image"):
        item["image"] = record.image_url
    if record.author:
        item["author"] = _person(record.author)
    if record.resolved_type == SchemaType.PODCAST_EPISODE.value and record.date_published:
        item["datePublished"] = record.date_published


GROUP_BUILDERS: Dict[SchemaGroup, Callable[[Dict[str, Any], ItemRecord], None]] = {
    SchemaGroup.PLATFORM: _add_platform,
    SchemaGroup.PRODUCT: _add_product,
    SchemaGroup.PLACE: _add_place,
    SchemaGroup.CREATIVE: _add_creative,
    SchemaGroup.PODCAST: _add_podcast,
}


def add_aggregate_rating(item: Dict[str, Any], record: Record) -> Dict[str, Any]:
    """
    Attach AggregateRating when ratingValue (0-5) or reviewCount (> 0) is valid.
    Invalid values are dropped; an empty rating is never attached.
    """
    record = _record(record)
    rating_value = record.rating_value or ""
    review_count = record.review_count or ""
    if not rating_value and not review_count:
        return item

    rating: Dict[str, Any] = {"@type": "AggregateRating"}

    value = parse_number(rating_value)
    if value is not None and WORST_RATING <= value <= BEST_RATING:
        rating["ratingValue"] = value
        rating["bestRating"] = BEST_RATING
        rating["worstRating"] = WORST_RATING

    count = parse_count(review_count)
    if count is not None and count > 0:
        rating["reviewCount"] = count

    if "ratingValue" in rating or "reviewCount" in rating:
        item["aggregateRating"] = rating
    return item


def ranked_item_ld(record: Record) -> Dict[str, Any]:
    """Single ranked list item as a schema.org object (no @context)."""
    record = _record(record)
    schema_type = record.resolved_type
    item: Dict[str, Any] = {
        "@type": schema_type,
        "name": record.title,
    }

    # alternateName is Platform-only; it is not valid on every type.
    if record.description:
        item["description"] = record.description
    if record.url:
        item["url"] = record.url
    if record.image_url and schema_type != SchemaType.PLATFORM.value:
        item["image"] = record.image_url

    group = group_for(schema_type)
    if group is not None:
        GROUP_BUILDERS[group](item, record)

    add_aggregate_rating(item, record)
    return item


def list_item_ld(position: int, item: Dict[str, Any]) -> Dict[str, Any]:
    return {"@type": "ListItem", "position": position, "item": item}


def item_list_ld(
    records: Iterable[Record],
    context: Optional[RenderContext] = None,
    positions: Optional[PositionCounter] = None,
) -> Optional[Dict[str, Any]]:
    """
    ItemList of ranked items for a singular page, or None when nothing should be emitted.

    A position is taken for every record before its title is checked, so records
    without a title leave a gap in the numbering of the items that follow.
    """
    context = context or RenderContext()
    if not context.is_singular:
        logger.debug("Skipping ItemList: not a singular view")
        return None

    records = list(records or [])
    if len(records) < context.min_items:
        logger.debug(
            "Skipping ItemList: %d ranked item(s), need %d",
            len(records),
            context.min_items,
        )
        return None

    positions = positions if positions is not None else PositionCounter()
    elements: List[Dict[str, Any]] = []
    skipped = 0
    for raw in records:
        position = positions.next()
        record = _record(raw)
        if not record.title:
            skipped += 1
            continue
        elements.append(list_item_ld(position, ranked_item_ld(record)))

    if skipped:
        logger.debug("Skipped %d ranked item(s) without a title", skipped)
    if not elements:
        return None

    return {
        "@context": "https://schema.org",
        "@type": "ItemList",
        "numberOfItems": len(elements),
        "itemListOrder": ITEM_LIST_ORDER,
        "itemListElement": elements,
    }
