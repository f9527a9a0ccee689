from __future__ import annotations

import os

import pytest


os.environ["OGA_BASE_URL"] = "https://oga.oneearthrising.com"
os.environ["OGA_LOG_JSON"] = "0"
os.environ.pop("OGA_CHARACTERS_PATH", None)
os.environ.pop("OGA_SPA_DIR", None)


@pytest.fixture()
def api_client():
    from fastapi.testclient import TestClient

    from oga_edge.main import create_app

    return TestClient(create_app())


@pytest.fixture()
def catalog():
    from oga_catalog import default_catalog

    return default_catalog()


@pytest.fixture()
def brand():
    from oga_catalog import DEFAULT_BRAND

    return DEFAULT_BRAND
