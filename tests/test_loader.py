import pandas as pd
import pytest

from storefront.catalog.images import ImageFile
from storefront.catalog.loader import (
    SpreadsheetParseError,
    UnsupportedFileTypeError,
    load_import_rows,
    load_spreadsheet,
)

CSV_TEXT = (
    "name,type,material,stock,slug,sizes,collection\n"
    "  Alpha Ring ,ring,gold,3,alpha-ring,\"S, M\",Bridal\n"
    ",,,,,,\n"
    "Beta Bangle,bangle,platinum,1,beta-bangle,,\n"
)


def test_load_csv_trims_and_skips_blank_rows(tmp_path):
    path = tmp_path / "products.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    rows = load_spreadsheet(path)
    assert len(rows) == 2
    assert rows[0]["name"] == "Alpha Ring"
    assert rows[0]["slug"] == "alpha-ring"
    assert rows[0]["sizes"] == "S, M"
    assert rows[1]["stock"] == "1"


def test_load_csv_from_bytes():
    rows = load_spreadsheet(CSV_TEXT.encode("utf-8"), filename="upload.CSV")
    assert [r["name"] for r in rows] == ["Alpha Ring", "Beta Bangle"]


def test_bytes_need_filename():
    with pytest.raises(ValueError):
        load_spreadsheet(b"name\nx\n")


def test_load_first_sheet_of_workbook(tmp_path):
    path = tmp_path / "products.xlsx"
    with pd.ExcelWriter(path) as writer:
        pd.DataFrame([{"name": "Alpha Ring", "type": "ring", "stock": 4}]).to_excel(
            writer, sheet_name="Products", index=False
        )
        pd.DataFrame([{"name": "Ignored"}]).to_excel(writer, sheet_name="Notes", index=False)
    rows = load_spreadsheet(path)
    assert rows == [{"name": "Alpha Ring", "type": "ring", "stock": "4"}]


def test_unsupported_extension(tmp_path):
    path = tmp_path / "products.json"
    path.write_text("[]")
    with pytest.raises(UnsupportedFileTypeError):
        load_spreadsheet(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_spreadsheet(tmp_path / "nope.csv")


def test_corrupt_workbook_is_parse_error():
    with pytest.raises(SpreadsheetParseError) as exc:
        load_spreadsheet(b"definitely not a zip archive", filename="products.xlsx")
    assert str(exc.value).startswith("Error parsing file")


def test_ragged_csv_is_parse_error():
    with pytest.raises(SpreadsheetParseError):
        load_spreadsheet(b"a,b\n1,2\n3,4,5,6\n", filename="bad.csv")


def test_load_import_rows_checks_store(tmp_path, store):
    collection = store.create_collection("Bridal")
    store.create_product(
        {"name": "Beta Bangle", "slug": "beta-bangle", "type": "bangle", "material": "platinum", "stock": 1}
    )
    path = tmp_path / "products.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")

    rows = load_import_rows(path, store=store, images=[ImageFile("alpha-ring.jpg", b"x", "image/jpeg")])

    alpha, beta = rows
    assert alpha.slug == "alpha-ring"
    assert alpha.is_valid
    assert alpha.fields["collection_id"] == collection.id
    assert [f.name for f in alpha.images] == ["alpha-ring.jpg"]
    assert "Slug already exists in database" in beta.errors
    assert beta.warnings == ["No collection specified."]
