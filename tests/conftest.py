# tests/conftest.py
"""
Pytest configuration and fixtures for the test suite
"""
import logging

import mongomock
import pytest
from fastapi.testclient import TestClient

from tennis_league.config import Settings
from tennis_league.main import create_app
from tennis_league.storage import MongoDbContext
from tennis_league.utils import logger as logger_module


@pytest.fixture
def settings():
    return Settings(
        connection_string="mongodb://localhost:27017",
        database_name="tennis_league_test",
        environment="Testing",
    )


@pytest.fixture
def mongo_client():
    """A fresh in-memory MongoDB client per test."""
    return mongomock.MongoClient()


@pytest.fixture
def db_context(settings, mongo_client):
    return MongoDbContext(settings, client=mongo_client)


@pytest.fixture
def client(settings, db_context):
    """
    Provides a TestClient for an app wired to the in-memory database.
    """
    app = create_app(settings=settings, db_context=db_context)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def root_logger(monkeypatch):
    """Lets setup_logger run again and restores the root logger afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    monkeypatch.setattr(logger_module, "_logging_configured", False)
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
