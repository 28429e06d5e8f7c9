# tests/api/conftest.py
"""
Shared fixtures for API tests.
Each app is built around a RegionStore holding the sample snapshot, so no
test touches the network or the bundled dataset unless it asks to.
"""

import pytest
from fastapi.testclient import TestClient

from cloudregions.api.app import create_app


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    """Creates a TestClient over the sample store."""
    with TestClient(app) as c:
        yield c
