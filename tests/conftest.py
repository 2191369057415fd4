import sys, pathlib

# Ensure project src directory is on path for tests
PROJECT_ROOT = pathlib.Path(__file__).parent.parent
SRC = PROJECT_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest

from database.config import DatabaseConfig


@pytest.fixture
def config(tmp_path):
    return DatabaseConfig(
        sqlite_path=str(tmp_path / "catalog.db"),
        media_dir=str(tmp_path / "media"),
    )


@pytest.fixture
def store(config):
    from storefront.persistence.sqlite import CatalogStore

    return CatalogStore(config)
