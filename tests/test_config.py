from database.config import DEFAULT_IMAGE_BUCKET, DatabaseConfig


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("DB_SQLITE_PATH", str(tmp_path / "env.db"))
    monkeypatch.setenv("STOREFRONT_API_URL", "https://api.example/rest/v1")
    monkeypatch.setenv("STOREFRONT_UPLOAD_URL", "https://api.example/functions/v1/upload-image")
    monkeypatch.setenv("STOREFRONT_ACCESS_TOKEN", "token")
    monkeypatch.setenv("STOREFRONT_HTTP_TIMEOUT", "12")
    monkeypatch.delenv("STOREFRONT_MEDIA_DIR", raising=False)

    config = DatabaseConfig.from_env()
    assert config.sqlite_path == str(tmp_path / "env.db")
    assert config.use_remote
    assert config.http_timeout == 12
    assert config.image_bucket == DEFAULT_IMAGE_BUCKET
    assert config.media_dir.endswith("media")


def test_from_config_file(tmp_path):
    path = tmp_path / "storefront.conf"
    path.write_text(
        "# comment\n\n"
        "sqlite_path = /tmp/catalog.db\n"
        "api_url = https://api.example/rest/v1\n"
        "image_bucket = jewelry\n",
        encoding="utf-8",
    )
    config = DatabaseConfig.from_config_file(str(path))
    assert config.sqlite_path == "/tmp/catalog.db"
    assert config.image_bucket == "jewelry"
    # upload url missing: stay local
    assert not config.use_remote
