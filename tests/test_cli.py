import pytest
import requests

from main import main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    conf = tmp_path / "storefront.conf"
    conf.write_text(
        "# local catalog\n"
        f"sqlite_path = {tmp_path / 'catalog.db'}\n"
        f"media_dir = {tmp_path / 'media'}\n",
        encoding="utf-8",
    )
    return tmp_path


def test_sample_then_import(workdir, capsys):
    assert main(["--config", "storefront.conf", "sample-csv", "--output", "products.csv"]) == 0
    assert (workdir / "products.csv").exists()

    assert main(["--config", "storefront.conf", "import", "products.csv", "--dry-run"]) == 0
    out = capsys.readouterr().out
    assert "Diamond Engagement Ring" in out
    assert "Collection 'bridal' not found" in out

    assert main(["--config", "storefront.conf", "import", "products.csv", "--user", "admin-1"]) == 0
    assert "2 products uploaded" in capsys.readouterr().out

    # same slugs again: nothing valid left
    assert main(["--config", "storefront.conf", "import", "products.csv"]) == 1

    assert main(["--config", "storefront.conf", "browse", "--material", "Diamond"]) == 0
    out = capsys.readouterr().out
    assert "1 of 2 products" in out
    assert "Diamond Engagement Ring | Rings | Diamond" in out

    # stored enum values work as well as labels
    assert main(["--config", "storefront.conf", "browse", "--material", "diamond", "--type", "ring"]) == 0
    assert "1 of 2 products" in capsys.readouterr().out


def test_import_rejects_unsupported_file(workdir):
    (workdir / "products.txt").write_text("name\nx\n")
    assert main(["--config", "storefront.conf", "import", "products.txt"]) == 2


def test_stock_commands(workdir, capsys):
    main(["--config", "storefront.conf", "sample-csv", "--output", "products.csv"])
    main(["--config", "storefront.conf", "import", "products.csv"])
    capsys.readouterr()

    assert main(["--config", "storefront.conf", "stock", "list"]) == 0
    out = capsys.readouterr().out
    product_id = next(line.split(" | ")[0] for line in out.splitlines() if "Gold Necklace Set" in line)
    assert "Low stock: 1" in out

    assert main(["--config", "storefront.conf", "stock", "set", product_id, "0"]) == 0
    assert "Gold Necklace Set: 0" in capsys.readouterr().out
    assert main(["--config", "storefront.conf", "stock", "adjust", product_id, "4"]) == 0
    assert "Gold Necklace Set: 4" in capsys.readouterr().out
    assert main(["--config", "storefront.conf", "stock", "set", "missing", "1"]) == 1


class JsonResponse:
    def __init__(self, payload):
        self.status_code = 200
        self.ok = True
        self._payload = payload

    def json(self):
        return self._payload

    def raise_for_status(self):
        pass


def test_browse_reads_hosted_catalog(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "remote.conf").write_text(
        f"sqlite_path = {tmp_path / 'unused.db'}\n"
        "api_url = https://api.example/rest/v1\n"
        "upload_url = https://api.example/functions/v1/upload-image\n"
        "access_token = token\n",
        encoding="utf-8",
    )
    tables = {
        "products": [
            {"id": "p1", "name": "Rose Band", "slug": "rose-band", "type": "ring", "material": "rose-gold",
             "collection_id": "c1", "stock": 4, "price_range": "₹20,000"},
        ],
        "collections": [{"id": "c1", "name": "Rivaah", "handle": "rivaah"}],
    }
    requested = []

    def fake_request(self, method, url, **kwargs):
        requested.append((method, url))
        return JsonResponse(tables[url.rsplit("/", 1)[-1]])

    monkeypatch.setattr(requests.Session, "request", fake_request)

    assert main(["--config", "remote.conf", "browse", "--material", "rose-gold"]) == 0
    out = capsys.readouterr().out
    assert "1 of 1 products" in out
    assert "Rose Band | Rings | Rose Gold | Rivaah" in out
    assert ("GET", "https://api.example/rest/v1/products") in requested
    assert not (tmp_path / "unused.db").exists()
