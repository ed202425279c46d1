"""Tests for ranked list JSON-LD: per-type projection, ratings and the ItemList gate."""

import json

import pytest

from packages.shared.json_ld import (
    PositionCounter,
    add_aggregate_rating,
    item_list_ld,
    ranked_item_ld,
    render_schema,
    script_tag,
    to_json,
)
from packages.shared.ranked_list import (
    ItemRecord,
    RANKED_LIST_BLOCK_NAME,
    RenderContext,
    SchemaGroup,
    SchemaType,
    group_for,
)

SINGULAR = RenderContext(is_singular=True)


class TestSchemaGroups:
    def test_every_type_has_one_group(self):
        for schema_type in SchemaType:
            assert isinstance(group_for(schema_type.value), SchemaGroup)

    def test_platform_is_its_own_group(self):
        members = [t for t in SchemaType if group_for(t.value) == SchemaGroup.PLATFORM]
        assert members == [SchemaType.PLATFORM]

    def test_unknown_type(self):
        assert group_for("Event") is None


class TestItemRecord:
    def test_aliases_and_defaults(self):
        record = ItemRecord.model_validate({"title": "A", "heroImageUrl": "h", "unknown": 1})
        assert record.hero_image_url == "h"
        assert record.resolved_type == "Product"
        assert record.resolved_currency == "GBP"

    def test_numbers_coerced_to_text(self):
        record = ItemRecord.model_validate({"title": "A", "price": 12.5, "reviewCount": 3})
        assert record.price == "12.5"
        assert record.review_count == "3"

    def test_odd_values_dropped(self):
        record = ItemRecord.model_validate({"title": ["A"], "price": True, "url": {"x": 1}})
        assert record.title is None
        assert record.price is None
        assert record.url is None

    def test_oversized_int_is_absent(self):
        record = ItemRecord.model_validate({"title": "A", "price": 10**5000})
        assert record.price is None
        assert "offers" not in ranked_item_ld({"title": "A", "price": 10**5000})


class TestCommonFields:
    def test_minimal_item(self):
        assert ranked_item_ld({"title": "A"}) == {"@type": "Product", "name": "A"}

    def test_empty_schema_type_defaults_to_product(self):
        assert ranked_item_ld({"title": "A", "schemaType": ""})["@type"] == "Product"

    def test_description_url_image(self):
        item = ranked_item_ld(
            {
                "title": "A",
                "schemaType": "Book",
                "description": "<p>Great</p>",
                "url": "https://example.com/a",
                "imageUrl": "https://example.com/a.png",
            }
        )
        assert item["description"] == "<p>Great</p>"
        assert item["url"] == "https://example.com/a"
        assert item["image"] == "https://example.com/a.png"

    def test_empty_values_omitted(self):
        item = ranked_item_ld({"title": "A", "description": "", "url": "", "imageUrl": ""})
        assert set(item) == {"@type", "name"}

    def test_alternate_name_not_emitted_outside_platform(self):
        item = ranked_item_ld({"title": "A", "schemaType": "SoftwareApplication", "alternateName": "AA"})
        assert "alternateName" not in item

    def test_unknown_type_passes_through_with_common_fields(self):
        item = ranked_item_ld({"title": "A", "schemaType": "Event", "price": "5", "url": "u"})
        assert item == {"@type": "Event", "name": "A", "url": "u"}


class TestPlatform:
    def test_thing_with_hero_and_logo(self):
        item = ranked_item_ld(
            {
                "title": "B",
                "schemaType": "Platform",
                "subtitle": "Video hosting",
                "heroImageUrl": "h",
                "imageUrl": "l",
                "alternateName": "Bee",
            }
        )
        assert item["@type"] == "Thing"
        assert item["image"] == ["h", "l"]
        assert item["disambiguatingDescription"] == "Video hosting"
        assert item["alternateName"] == "Bee"

    @pytest.mark.parametrize(
        "attrs, expected",
        [({"heroImageUrl": "h"}, "h"), ({"imageUrl": "l"}, "l")],
    )
    def test_single_image_is_bare_string(self, attrs, expected):
        item = ranked_item_ld({"title": "B", "schemaType": "Platform", **attrs})
        assert item["image"] == expected

    def test_no_images(self):
        item = ranked_item_ld({"title": "B", "schemaType": "Platform"})
        assert "image" not in item

    def test_same_as_list(self):
        item = ranked_item_ld(
            {"title": "B", "schemaType": "Platform", "sameAs": "https://x.com, https://y.com"}
        )
        assert item["sameAs"] == ["https://x.com", "https://y.com"]

    def test_same_as_single_after_dropping_blanks(self):
        item = ranked_item_ld({"title": "B", "schemaType": "Platform", "sameAs": " , https://x.com ,,"})
        assert item["sameAs"] == "https://x.com"

    def test_same_as_all_blank_omitted(self):
        item = ranked_item_ld({"title": "B", "schemaType": "Platform", "sameAs": " , ,"})
        assert "sameAs" not in item

    def test_platform_ignores_product_fields(self):
        item = ranked_item_ld({"title": "B", "schemaType": "Platform", "price": "10"})
        assert "offers" not in item


class TestProduct:
    @pytest.mark.parametrize("schema_type", ["Product", "SoftwareApplication"])
    def test_offer(self, schema_type):
        item = ranked_item_ld({"title": "A", "schemaType": schema_type, "price": "9.99", "currency": "USD"})
        assert item["offers"] == {"@type": "Offer", "price": 9.99, "priceCurrency": "USD"}

    def test_default_currency(self):
        item = ranked_item_ld({"title": "A", "price": "20"})
        assert item["offers"]["priceCurrency"] == "GBP"
        assert isinstance(item["offers"]["price"], float)

    @pytest.mark.parametrize("price", ["free", "£10", "", None])
    def test_non_numeric_price_has_no_offers(self, price):
        assert "offers" not in ranked_item_ld({"title": "A", "price": price})


class TestPlace:
    @pytest.mark.parametrize("schema_type", ["Place", "LocalBusiness", "Restaurant"])
    def test_address_and_telephone(self, schema_type):
        item = ranked_item_ld(
            {"title": "A", "schemaType": schema_type, "address": "1 High St", "telephone": "0123"}
        )
        assert item["address"] == {"@type": "PostalAddress", "streetAddress": "1 High St"}
        assert item["telephone"] == "0123"

    def test_place_ignores_author(self):
        item = ranked_item_ld({"title": "A", "schemaType": "Restaurant", "author": "X"})
        assert "author" not in item


class TestCreative:
    @pytest.mark.parametrize("schema_type", ["Book", "Movie", "CreativeWork"])
    def test_author_and_date(self, schema_type):
        item = ranked_item_ld(
            {"title": "A", "schemaType": schema_type, "author": "Jo", "datePublished": "2020-01-02"}
        )
        assert item["author"] == {"@type": "Person", "name": "Jo"}
        assert item["datePublished"] == "2020-01-02"

    def test_book_ignores_price(self):
        assert "offers" not in ranked_item_ld({"title": "A", "schemaType": "Book", "price": "5"})


class TestPodcast:
    def test_hero_image_preferred(self):
        item = ranked_item_ld(
            {"title": "P", "schemaType": "PodcastSeries", "heroImageUrl": "h", "imageUrl": "l"}
        )
        assert item["image"] == "h"

    def test_logo_when_no_hero(self):
        item = ranked_item_ld({"title": "P", "schemaType": "PodcastSeries", "imageUrl": "l"})
        assert item["image"] == "l"

    def test_series_has_no_date(self):
        item = ranked_item_ld(
            {"title": "P", "schemaType": "PodcastSeries", "author": "Host", "datePublished": "2024-05-01"}
        )
        assert item["author"] == {"@type": "Person", "name": "Host"}
        assert "datePublished" not in item

    def test_episode_has_date(self):
        item = ranked_item_ld({"title": "P", "schemaType": "PodcastEpisode", "datePublished": "2024-05-01"})
        assert item["datePublished"] == "2024-05-01"


class TestAggregateRating:
    def test_no_rating_inputs(self):
        assert add_aggregate_rating({}, {}) == {}

    def test_value_and_count(self):
        item = add_aggregate_rating({}, {"ratingValue": "4.5", "reviewCount": "120"})
        assert item["aggregateRating"] == {
            "@type": "AggregateRating",
            "ratingValue": 4.5,
            "bestRating": 5,
            "worstRating": 0,
            "reviewCount": 120,
        }

    def test_zero_review_count_omitted(self):
        item = add_aggregate_rating({}, {"ratingValue": "4.5", "reviewCount": "0"})
        assert item["aggregateRating"] == {
            "@type": "AggregateRating",
            "ratingValue": 4.5,
            "bestRating": 5,
            "worstRating": 0,
        }

    def test_out_of_range_value_keeps_count(self):
        item = add_aggregate_rating({}, {"ratingValue": "6", "reviewCount": "10"})
        assert item["aggregateRating"] == {"@type": "AggregateRating", "reviewCount": 10}

    @pytest.mark.parametrize("value", ["0", "5"])
    def test_bounds_inclusive(self, value):
        item = add_aggregate_rating({}, {"ratingValue": value})
        assert item["aggregateRating"]["ratingValue"] == float(value)

    @pytest.mark.parametrize(
        "attrs",
        [
            {"ratingValue": "-1"},
            {"ratingValue": "great"},
            {"reviewCount": "0"},
            {"reviewCount": "-4"},
            {"ratingValue": "7", "reviewCount": "lots"},
        ],
    )
    def test_nothing_valid_means_no_rating(self, attrs):
        assert "aggregateRating" not in add_aggregate_rating({}, attrs)

    def test_fractional_review_count_truncated(self):
        item = add_aggregate_rating({}, {"reviewCount": "3.9"})
        assert item["aggregateRating"]["reviewCount"] == 3

    def test_rating_applies_to_every_type(self):
        item = ranked_item_ld({"title": "B", "schemaType": "Platform", "ratingValue": "3"})
        assert item["@type"] == "Thing"
        assert item["aggregateRating"]["ratingValue"] == 3.0


class TestItemListGate:
    def test_not_singular(self):
        records = [{"title": "A"}, {"title": "B"}]
        assert item_list_ld(records, RenderContext(is_singular=False)) is None

    def test_default_context_is_not_singular(self):
        assert item_list_ld([{"title": "A"}, {"title": "B"}]) is None

    @pytest.mark.parametrize("records", [[], [{"title": "A", "ratingValue": "4.5", "reviewCount": "0"}]])
    def test_fewer_than_two_records(self, records):
        assert item_list_ld(records, SINGULAR) is None

    def test_all_titles_blank(self):
        assert item_list_ld([{"title": ""}, {}, {"title": None}], SINGULAR) is None

    def test_pre_filter_count_gates(self):
        doc = item_list_ld([{"title": "A"}, {"title": ""}], SINGULAR)
        assert doc["numberOfItems"] == 1

    def test_custom_minimum(self):
        context = RenderContext(is_singular=True, min_items=1)
        doc = item_list_ld([{"title": "Solo"}], context)
        assert doc["itemListElement"][0]["position"] == 1


class TestItemList:
    def test_document_shape(self):
        doc = item_list_ld([{"title": "A"}, {"title": "B", "schemaType": "Book"}], SINGULAR)
        assert doc["@context"] == "https://schema.org"
        assert doc["@type"] == "ItemList"
        assert doc["itemListOrder"] == "Descending"
        assert doc["numberOfItems"] == len(doc["itemListElement"]) == 2
        assert doc["itemListElement"][1] == {
            "@type": "ListItem",
            "position": 2,
            "item": {"@type": "Book", "name": "B"},
        }

    def test_skipped_records_leave_position_gaps(self):
        records = [
            {"title": "A", "schemaType": "Product", "price": "9.99"},
            {"title": "", "schemaType": "Book"},
            {
                "title": "B",
                "schemaType": "Platform",
                "heroImageUrl": "h",
                "imageUrl": "l",
                "sameAs": "https://x.com, https://y.com",
            },
        ]
        doc = item_list_ld(records, SINGULAR)
        elements = doc["itemListElement"]
        assert doc["numberOfItems"] == 2
        assert [e["position"] for e in elements] == [1, 3]
        assert elements[0]["item"]["offers"]["price"] == 9.99
        b = elements[1]["item"]
        assert b["@type"] == "Thing"
        assert b["image"] == ["h", "l"]
        assert b["sameAs"] == ["https://x.com", "https://y.com"]

    def test_accepts_item_records(self):
        records = [ItemRecord(title="A"), ItemRecord(title="B", schema_type="Movie")]
        doc = item_list_ld(records, SINGULAR)
        assert doc["itemListElement"][1]["item"]["@type"] == "Movie"

    def test_positions_from_shared_counter(self):
        counter = PositionCounter()
        counter.next()
        doc = item_list_ld([{"title": "A"}, {"title": "B"}], SINGULAR, counter)
        assert [e["position"] for e in doc["itemListElement"]] == [2, 3]
        assert counter.value == 3

    def test_rerun_after_reset_is_identical(self):
        records = [{"title": "A", "ratingValue": "4"}, {"title": "B", "schemaType": "Place", "address": "x"}]
        counter = PositionCounter()
        first = to_json(item_list_ld(records, SINGULAR, counter))
        counter.reset()
        second = to_json(item_list_ld(records, SINGULAR, counter))
        assert first == second

    def test_fresh_counter_per_call(self):
        records = [{"title": "A"}, {"title": "B"}]
        first = item_list_ld(records, SINGULAR)
        second = item_list_ld(records, SINGULAR)
        assert first == second

    def test_input_records_not_mutated(self):
        records = [{"title": "A", "price": "1"}, {"title": "B"}]
        item_list_ld(records, SINGULAR)
        assert records == [{"title": "A", "price": "1"}, {"title": "B"}]


class TestSerialization:
    def test_slashes_and_unicode_unescaped(self):
        out = to_json({"url": "https://example.com/a", "name": "Café £5"})
        assert out == '{"url":"https://example.com/a","name":"Café £5"}'

    def test_script_tag(self):
        tag = script_tag({"@type": "ItemList"})
        assert tag == '<script type="application/ld+json">{"@type":"ItemList"}</script>\n'

    def test_no_document_no_tag(self):
        assert script_tag(None) == ""

    def test_render_schema_from_tree(self):
        tree = [
            {"blockName": "core/heading", "attrs": {"content": "Top picks"}},
            {"blockName": RANKED_LIST_BLOCK_NAME, "attrs": {"title": "A"}},
            {
                "blockName": "core/group",
                "innerBlocks": [{"blockName": RANKED_LIST_BLOCK_NAME, "attrs": {"title": "B"}}],
            },
        ]
        tag = render_schema(tree, SINGULAR)
        payload = json.loads(tag[len('<script type="application/ld+json">'):-len("</script>\n")])
        assert [e["item"]["name"] for e in payload["itemListElement"]] == ["A", "B"]

    def test_render_schema_single_block(self):
        tree = [{"blockName": RANKED_LIST_BLOCK_NAME, "attrs": {"title": "A"}}]
        assert render_schema(tree, SINGULAR) == ""
