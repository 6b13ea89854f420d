"""Shared test fixtures for the bigletters test suite.

Provides a fresh grid store per test and a FastAPI test client wired
to it, so HTTP tests can inspect the store directly.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bigletters.grid.store import GridStore
from bigletters.web.server import create_app


# ---------------------------------------------------------------------------
# Grid Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def store() -> GridStore:
    """A fresh, all-bright 16x16 grid."""
    return GridStore()


# ---------------------------------------------------------------------------
# HTTP Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def app(store: GridStore) -> FastAPI:
    """The web application sharing ``store``."""
    return create_app(grid=store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """A test client for the web application."""
    return TestClient(app)
