"""Shared pytest fixtures for aroma validator tests."""

import json

import pytest
from fastapi.testclient import TestClient

from main import create_app
from sofka_aroma.catalog.catalog import CatalogManager

TEST_SECRET = "test-secret"

CATALOG = {
    "vanilla": {"aroma": "Vainilla", "discount": 15, "validDays": 3},
    "lavender": {
        "aroma": "Lavanda",
        "synonyms": ["Lavender", "lavanda  francesa"],
        "discount": 20,
        "validDays": 5,
    },
    "coffee": {"aroma": "Café"},
}


@pytest.fixture
def catalog_path(tmp_path):
    """Write the test catalog to a temporary JSON asset."""
    path = tmp_path / "candles.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    return path


@pytest.fixture
def catalog(catalog_path):
    return CatalogManager(catalog_path)


@pytest.fixture
def client(catalog):
    """Client for an app with signature enforcement disabled."""
    return TestClient(create_app(catalog=catalog, secret=""))


@pytest.fixture
def signing_secret():
    return TEST_SECRET


@pytest.fixture
def signed_client(catalog, signing_secret):
    """Client for an app that requires signed ids."""
    return TestClient(create_app(catalog=catalog, secret=signing_secret))
