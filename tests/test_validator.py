import pytest

from storefront.catalog.validator import (
    flag_existing_slugs,
    resolve_collections,
    validate_row,
    validate_rows,
)


def make_raw(**overrides):
    raw = {
        "name": "Diamond Engagement Ring",
        "description": "Beautiful solitaire diamond ring",
        "sku": "DR-001",
        "type": "ring",
        "material": "diamond",
        "occasion": "bridal",
        "stock": "10",
        "featured": "false",
        "most_loved": "TRUE",
        "new_arrival": "",
        "sizes": "S,M,L",
        "slug": "diamond-engagement-ring",
    }
    raw.update(overrides)
    return raw


def test_valid_row_is_normalised():
    row = validate_row(make_raw(), 1)
    assert row.errors == []
    assert row.is_valid
    assert row.row_index == 1
    assert row.fields["stock"] == 10
    assert row.fields["featured"] is False
    assert row.fields["most_loved"] is True
    assert row.fields["new_arrival"] is False
    assert row.fields["sizes"] == ["S", "M", "L"]


@pytest.mark.parametrize("field", ["name", "type", "material", "stock", "slug"])
def test_missing_required_field_reports_field_name(field):
    raw = make_raw(**{field: "   "})
    row = validate_row(raw, 3)
    assert any(field in e for e in row.errors)
    assert not row.is_valid


def test_missing_slug_and_name_reports_both():
    row = validate_row(make_raw(name="", slug=""), 1)
    assert "name is required" in row.errors
    assert "slug is required" in row.errors


def test_missing_slug_rejected_but_derived_for_matching():
    raw = make_raw(name="Diamond Engagement Ring!")
    raw.pop("slug")
    row = validate_row(raw, 1)
    assert "slug is required" in row.errors
    assert not row.is_valid
    assert row.slug == "diamond-engagement-ring"


@pytest.mark.parametrize(
    "field,value,allowed",
    [
        ("type", "watch", "ring, necklace, earring, bracelet, bangle"),
        ("material", "silver", "gold, diamond, platinum, rose-gold"),
        ("occasion", "office", "bridal, festive, daily-wear, gift"),
    ],
)
def test_enum_mismatch(field, value, allowed):
    row = validate_row(make_raw(**{field: value}), 1)
    assert f"Invalid {field}. Must be one of: {allowed}" in row.errors


def test_occasion_is_optional():
    row = validate_row(make_raw(occasion=""), 1)
    assert row.is_valid


def test_stock_must_be_numeric():
    row = validate_row(make_raw(stock="ten"), 1)
    assert "Stock must be a valid number" in row.errors


def test_stock_negative_rejected():
    row = validate_row(make_raw(stock="-2"), 1)
    assert "Stock cannot be negative" in row.errors


def test_stock_must_be_whole_number():
    row = validate_row(make_raw(stock="2.7"), 1)
    assert "Stock must be a whole number" in row.errors
    assert not row.is_valid
    assert validate_row(make_raw(stock="7.0"), 1).fields["stock"] == 7


@pytest.mark.parametrize("sizes,expected", [("S, M, L", ["S", "M", "L"]), ("", []), (None, [])])
def test_sizes_coercion(sizes, expected):
    raw = make_raw()
    if sizes is None:
        raw.pop("sizes")
    else:
        raw["sizes"] = sizes
    assert validate_row(raw, 1).fields["sizes"] == expected


def test_booleans_absent_are_false():
    raw = make_raw()
    for key in ("featured", "most_loved", "new_arrival"):
        raw.pop(key)
    row = validate_row(raw, 1)
    assert row.fields["featured"] is False
    assert row.fields["most_loved"] is False
    assert row.fields["new_arrival"] is False


def test_all_errors_collected_in_one_pass():
    row = validate_row({"type": "watch", "material": "silver", "stock": "x"}, 5)
    assert "name is required" in row.errors
    assert "slug is required" in row.errors
    assert any(e.startswith("Invalid type") for e in row.errors)
    assert any(e.startswith("Invalid material") for e in row.errors)
    assert "Stock must be a valid number" in row.errors


def test_validate_row_never_raises_on_odd_input():
    row = validate_row({"stock": float("nan"), "name": None}, 1)
    assert "stock is required" in row.errors
    assert "name is required" in row.errors


def test_requested_filenames_parsed():
    row = validate_row(make_raw(image_filenames=" A.JPG | b.png|notes.txt| "), 1)
    assert row.requested_filenames == ["a.jpg", "b.png"]


def test_price_range_alias():
    row = validate_row(make_raw(priceRange="₹50,000 - ₹75,000"), 1)
    assert row.fields["price_range"] == "₹50,000 - ₹75,000"


def test_validate_rows_indexes_and_duplicate_slugs():
    rows = validate_rows(
        [
            make_raw(),
            make_raw(name="Other", sku="X"),
            make_raw(name="Gold Necklace", slug="gold-necklace"),
        ]
    )
    assert [r.row_index for r in rows] == [1, 2, 3]
    assert "Duplicate slug in file" in rows[0].errors
    assert "Duplicate slug in file" in rows[1].errors
    assert rows[2].is_valid


def test_existing_slugs_flagged():
    rows = validate_rows([make_raw(), make_raw(slug="new-one")])
    flag_existing_slugs(rows, {"diamond-engagement-ring"})
    assert "Slug already exists in database" in rows[0].errors
    assert rows[1].is_valid


def test_collections_resolved_case_insensitively():
    rows = validate_rows(
        [
            make_raw(collection="Bridal"),
            make_raw(slug="b", collection="unknown"),
            make_raw(slug="c"),
        ]
    )
    resolve_collections(rows, {"bridal": "col-1"})
    assert rows[0].fields["collection_id"] == "col-1"
    assert rows[0].warnings == []
    assert rows[1].fields["collection_id"] is None
    assert rows[1].warnings == ["Collection 'unknown' not found. Will assign no collection."]
    assert rows[2].warnings == ["No collection specified."]
    # warnings never block the import
    assert all(r.is_valid for r in rows)
