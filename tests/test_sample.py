from storefront.catalog.loader import load_spreadsheet
from storefront.catalog.sample import SAMPLE_COLUMNS, sample_csv, write_sample_csv
from storefront.catalog.validator import validate_rows


def test_sample_columns_cover_import_fields():
    for column in ("name", "type", "material", "stock", "slug", "sizes", "collection", "image_filenames"):
        assert column in SAMPLE_COLUMNS
    header = sample_csv().splitlines()[0]
    assert header.split(",") == SAMPLE_COLUMNS


def test_sample_rows_validate(tmp_path):
    path = write_sample_csv(tmp_path / "sample-products.csv")
    rows = validate_rows(load_spreadsheet(path))
    assert [r.slug for r in rows] == ["diamond-engagement-ring", "gold-necklace-set"]
    assert all(r.is_valid for r in rows)
    assert rows[0].fields["sizes"] == ["S", "M", "L"]
    assert rows[0].fields["most_loved"] is True
    assert rows[0].requested_filenames == ["diamond-engagement-ring-1.jpg", "diamond-engagement-ring-2.jpg"]
    assert rows[1].fields["stock"] == 5
