"""
Shared pytest fixtures for the Warcraft Logs client tests.

Provides fake aiohttp sessions and responses so no test touches the network.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.warcraftlogs.client import WarcraftLogsClient

API_KEY = "abc123abcd123"


def make_response(status=200, body=b"{}", reason="OK"):
    """Build a fake aiohttp response usable as an async context manager."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    response = AsyncMock()
    response.status = status
    response.reason = reason
    response.read = AsyncMock(return_value=body)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def make_session(response=None, side_effect=None):
    """Build a fake aiohttp.ClientSession whose get() yields `response`."""
    session = MagicMock()
    if side_effect is not None:
        session.get = MagicMock(side_effect=side_effect)
    else:
        session.get = MagicMock(return_value=response)
    session.__aenter__ = AsyncMock(return_value=session)
    session.__aexit__ = AsyncMock(return_value=None)
    return session


def requested_url(session):
    """Return the yarl.URL passed to the fake session's get()."""
    session.get.assert_called_once()
    return session.get.call_args[0][0]


@pytest.fixture
def ok_response():
    return make_response(200, b'{"id":42}')


@pytest.fixture
def session(ok_response):
    return make_session(ok_response)


@pytest.fixture
def client(session):
    """Client with a key and an injected fake session."""
    return WarcraftLogsClient(api_key=API_KEY, session=session)
