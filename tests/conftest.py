import json

import pytest

from server import create_app
from wedding_site.services.admin_service import AdminQueryService
from wedding_site.services.config_store import ConfigStore
from wedding_site.services.response_store import ResponseStore
from wedding_site.services.rsvp_service import RsvpService

ADMIN_PASSWORD = "open-sesame"

SITE_CONFIG = {
    "theme": {"primaryColor": "#8b6f47"},
    "couple": {"name1": "Alex", "name2": "Sam"},
    "event": {"type": "Wedding", "date": "June 20, 2026"},
    "admin": {"password": ADMIN_PASSWORD},
}


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(SITE_CONFIG))
    return path


@pytest.fixture
def db_file(tmp_path):
    return tmp_path / "data" / "database.json"


@pytest.fixture
def config_store(config_file):
    return ConfigStore(config_file)


@pytest.fixture
def store(db_file):
    store = ResponseStore(db_file)
    store.load()
    return store


@pytest.fixture
def rsvp_service(store):
    return RsvpService(store)


@pytest.fixture
def admin_service(store, config_store):
    return AdminQueryService(store, config_store)


@pytest.fixture
def app(config_store, store):
    app = create_app(config_store=config_store, response_store=store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_password():
    return ADMIN_PASSWORD


@pytest.fixture
def admin_headers(admin_password):
    return {"X-Admin-Password": admin_password}
