"""Pytest configuration and shared fixtures."""

from typing import Iterator
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from hello_api.common.deps import get_request_logger
from hello_api.core.config import Settings
from hello_api.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """A fresh application per test, no shared routing state."""
    return create_app(settings)


@pytest.fixture
def request_logger(app: FastAPI) -> Iterator[Mock]:
    """Replace the root handler's request logger with a mock."""
    logger = Mock()
    app.dependency_overrides[get_request_logger] = lambda: logger
    yield logger
    app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c
