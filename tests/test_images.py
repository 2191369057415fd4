from storefront.catalog.images import (
    MAX_IMAGES_PER_ROW,
    ImageFile,
    assign_images,
    file_matches_row,
    load_image_files,
)
from storefront.catalog.validator import validate_row


def make_row(name="Gold Necklace Set", slug="gold-necklace-set", sku="GN-002", **extra):
    raw = {
        "name": name,
        "slug": slug,
        "sku": sku,
        "type": "necklace",
        "material": "gold",
        "stock": "5",
    }
    raw.update(extra)
    return validate_row(raw, 1)


def img(name):
    return ImageFile(name=name, content=b"x", content_type="image/jpeg")


def test_matches_slug_sku_or_hyphenated_name():
    row = make_row(name="Gold Necklace Set", slug="gns", sku="GN-002")
    assert file_matches_row("GNS-front.jpg", row)
    assert file_matches_row("photo-gn-002.png", row)
    assert file_matches_row("Gold-Necklace-Set_2.webp", row)
    assert not file_matches_row("silver-ring.jpg", row)


def test_empty_sku_does_not_match_everything():
    row = make_row(sku="")
    assert not file_matches_row("unrelated.jpg", row)


def test_assignment_caps_at_five_in_file_order():
    files = [img(f"gold-necklace-set-{i}.jpg") for i in range(7)]
    rows, matched = assign_images([make_row()], files)
    assert matched == 1
    assert [f.name for f in rows[0].images] == [f"gold-necklace-set-{i}.jpg" for i in range(MAX_IMAGES_PER_ROW)]


def test_same_file_can_match_several_rows():
    files = [img("ring-gold-1.jpg")]
    rows, matched = assign_images(
        [
            make_row(name="Ring", slug="ring", sku=""),
            make_row(name="Ring Gold", slug="ring-gold", sku=""),
        ],
        files,
    )
    assert matched == 2
    assert rows[0].images == rows[1].images == files


def test_requested_filenames_match_exactly():
    files = [img("gold-necklace-set-1.jpg"), img("Extra.PNG"), img("other.jpg")]
    row = make_row(image_filenames="extra.png|missing.jpg")
    rows, _ = assign_images([row], files)
    assert [f.name for f in rows[0].images] == ["Extra.PNG"]


def test_assignment_returns_new_rows():
    row = make_row()
    rows, _ = assign_images([row], [img("gold-necklace-set.jpg")])
    assert row.images == []
    assert len(rows[0].images) == 1
    rows[0].errors.append("late error")
    assert row.errors == []


def test_load_image_files_from_directory(tmp_path):
    (tmp_path / "b.png").write_bytes(b"png")
    (tmp_path / "a.jpg").write_bytes(b"jpg")
    (tmp_path / "notes.txt").write_text("skip")
    (tmp_path / "c.gif").write_bytes(b"gif")
    files = load_image_files(tmp_path)
    assert [f.name for f in files] == ["a.jpg", "b.png"]
    assert files[0].content_type == "image/jpeg"
    assert files[1].content == b"png"
