"""Shared pytest fixtures."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from requests import Session

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from shapeshift import (  # noqa: E402
    HTTPClient,
    HTTPClientConfig,
    ShapeShiftClient,
    ShapeShiftClientConfig,
)
from tests.fixtures import BASE_URL  # noqa: E402


@pytest.fixture()
def config() -> ShapeShiftClientConfig:
    return ShapeShiftClientConfig(base_url=BASE_URL, timeout=2)


@pytest.fixture()
def client(config: ShapeShiftClientConfig) -> ShapeShiftClient:
    """Client that talks through ``requests.request`` (intercepted by ``responses``)."""

    return ShapeShiftClient(config)


@pytest.fixture()
def session() -> MagicMock:
    """Session double whose ``request`` calls can be counted."""

    return MagicMock(spec=Session)


@pytest.fixture()
def mocked_client(config: ShapeShiftClientConfig, session: MagicMock) -> ShapeShiftClient:
    http = HTTPClient(
        HTTPClientConfig(
            base_url=config.base_url,
            timeout=config.timeout,
            headers={"User-Agent": config.user_agent},
        ),
        session=session,
    )
    return ShapeShiftClient(config, client=http)
