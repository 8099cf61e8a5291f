# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from resalehub.core.config import Settings
from resalehub.db.dal import Database
from resalehub.db.migrate import apply_migrations
from resalehub.main import create_app


@pytest.fixture
def settings(tmp_path):
    s = Settings(data_dir=tmp_path, db_filename="test.sqlite3", debug=False)
    s.init_post_load()
    return s


@pytest.fixture
def db(settings):
    apply_migrations(settings.db_path)
    return Database(settings.db_path)


@pytest.fixture
def client(settings):
    app = create_app(settings_override=settings)
    with TestClient(app) as c:
        yield c
