"""Ranked list block models: item attributes, schema types, content tree, render context."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

RANKED_LIST_BLOCK_NAME = "wcg/ranked-list-block"
DEFAULT_SCHEMA_TYPE = "Product"
DEFAULT_CURRENCY = "GBP"
MIN_LIST_ITEMS = 2


class SchemaType(str, Enum):
    """Schema types selectable for a ranked list item."""

    PRODUCT = "Product"
    SOFTWARE_APPLICATION = "SoftwareApplication"
    PLATFORM = "Platform"
    PLACE = "Place"
    LOCAL_BUSINESS = "LocalBusiness"
    RESTAURANT = "Restaurant"
    BOOK = "Book"
    MOVIE = "Movie"
    CREATIVE_WORK = "CreativeWork"
    PODCAST_SERIES = "PodcastSeries"
    PODCAST_EPISODE = "PodcastEpisode"


class SchemaGroup(str, Enum):
    """Field applicability group. Every SchemaType belongs to exactly one."""

    PLATFORM = "platform"
    PRODUCT = "product"
    PLACE = "place"
    CREATIVE = "creative"
    PODCAST = "podcast"


SCHEMA_GROUPS: Dict[SchemaType, SchemaGroup] = {
    SchemaType.PLATFORM: SchemaGroup.PLATFORM,
    SchemaType.PRODUCT: SchemaGroup.PRODUCT,
    SchemaType.SOFTWARE_APPLICATION: SchemaGroup.PRODUCT,
    SchemaType.PLACE: SchemaGroup.PLACE,
    SchemaType.LOCAL_BUSINESS: SchemaGroup.PLACE,
    SchemaType.RESTAURANT: SchemaGroup.PLACE,
    SchemaType.BOOK: SchemaGroup.CREATIVE,
    SchemaType.MOVIE: SchemaGroup.CREATIVE,
    SchemaType.CREATIVE_WORK: SchemaGroup.CREATIVE,
    SchemaType.PODCAST_SERIES: SchemaGroup.PODCAST,
    SchemaType.PODCAST_EPISODE: SchemaGroup.PODCAST,
}


def group_for(schema_type: str) -> Optional[SchemaGroup]:
    """Applicability group for a schema type string; None if the type is unknown."""
    try:
        return SCHEMA_GROUPS[SchemaType(schema_type)]
    except ValueError:
        return None


class ItemRecord(BaseModel):
    """
    Attribute bag of one ranked list block.
    Never fails validation: numbers become strings, other non-string values become None.
    """

    title: Optional[str] = None
    schema_type: Optional[str] = Field(default=None, alias="schemaType")
    description: Optional[str] = None
    url: Optional[str] = None
    url_button_text: Optional[str] = Field(default=None, alias="urlButtonText")
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    image_alt: Optional[str] = Field(default=None, alias="imageAlt")
    hero_image_url: Optional[str] = Field(default=None, alias="heroImageUrl")
    hero_image_alt: Optional[str] = Field(default=None, alias="heroImageAlt")
    subtitle: Optional[str] = None
    price: Optional[str] = None
    currency: Optional[str] = None
    rating_value: Optional[str] = Field(default=None, alias="ratingValue")
    review_count: Optional[str] = Field(default=None, alias="reviewCount")
    address: Optional[str] = None
    telephone: Optional[str] = None
    author: Optional[str] = None
    date_published: Optional[str] = Field(default=None, alias="datePublished")
    alternate_name: Optional[str] = Field(default=None, alias="alternateName")
    same_as: Optional[str] = Field(default=None, alias="sameAs")

    class Config:
        populate_by_name = True
        extra = "ignore"

    @field_validator("*", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Optional[str]:
        if isinstance(value, str):
            return value
        if isinstance(value, bool) or value is None:
            return None
        if isinstance(value, (int, float)):
            try:
                return str(value)
            except ValueError:
                # int too long for str() conversion
                return None
        return None

    @property
    def resolved_type(self) -> str:
        return self.schema_type or DEFAULT_SCHEMA_TYPE

    @property
    def resolved_currency(self) -> str:
        return self.currency or DEFAULT_CURRENCY


class ContentNode(BaseModel):
    """Parsed content block: optional name, optional attributes, nested blocks."""

    block_name: Optional[str] = Field(default=None, alias="blockName")
    attrs: Optional[Dict[str, Any]] = None
    inner_blocks: List["ContentNode"] = Field(default_factory=list, alias="innerBlocks")

    class Config:
        populate_by_name = True
        extra = "ignore"

    @field_validator("attrs", mode="before")
    @classmethod
    def attrs_mapping(cls, value: Any) -> Optional[Dict[str, Any]]:
        # Blocks without attributes serialize as [] (empty PHP array).
        return value if isinstance(value, dict) else None


class RenderContext(BaseModel):
    """Page context for one render pass."""

    is_singular: bool = False
    min_items: int = MIN_LIST_ITEMS
