"""Async Warcraft Logs v1 API client.

The client holds the API key and performs the single shared request routine
(`request_json`) that every endpoint wrapper in `src.warcraftlogs.endpoints`
calls through. It wraps `aiohttp` and opens one session per call unless a
long-lived session is handed in.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import quote
import json

import aiohttp
from yarl import URL

from src.config import get_wcl_config
from src.utils.logging import logger


API_HOST = "www.warcraftlogs.com"
API_PORT = 443
API_ROOT = "/v1"

ParamValue = Union[str, int, float, bool]

# encodeURIComponent / encodeURI leave these literal (quote() always keeps "_.-~").
# "?" and "#" are always escaped in paths so the query string stays intact.
_COMPONENT_SAFE = "!*'()"
_PATH_SAFE = _COMPONENT_SAFE + ";,/:@&=+$"


class WarcraftLogsError(RuntimeError):
    """Base class for errors raised by the client."""


class WarcraftLogsHTTPError(WarcraftLogsError):
    def __init__(self, status_code: int, reason: Optional[str], path: str):
        super().__init__(f"Error code={status_code} {reason or ''}".rstrip())
        self.status_code = status_code
        self.reason = reason
        self.path = path


class WarcraftLogsDecodeError(WarcraftLogsError):
    def __init__(self, path: str, body: str, detail: str):
        super().__init__(f"Invalid JSON response for {path}: {detail}")
        self.path = path
        # Keep error payloads bounded
        self.body = body[:2000]


def _format_value(value: Any) -> str:
    # bool first: it is also an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise TypeError(f"unsupported query parameter value {value!r} ({type(value).__name__})")


def serialize_params(params: Mapping[str, ParamValue]) -> str:
    """Serialize a parameter mapping into a query string.

    Keys and values are percent-encoded independently and joined as
    ``key=value`` pairs with ``&`` in mapping order.

    >>> serialize_params({"a": "1", "b": "x y"})
    'a=1&b=x%20y'
    """
    parts = []
    for key, value in params.items():
        if not isinstance(key, str):
            raise TypeError(f"query parameter names must be str, got {type(key).__name__}")
        parts.append(quote(key, safe=_COMPONENT_SAFE) + "=" + quote(_format_value(value), safe=_COMPONENT_SAFE))
    return "&".join(parts)


def encode_path(path: str) -> str:
    """Percent-encode a resource path, leaving URL delimiters such as '/' intact."""
    return quote(path, safe=_PATH_SAFE)


def _reject_constant(name: str):
    # NaN and Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name!r}")


class WarcraftLogsClient:
    def __init__(self, api_key: str = "", timeout: Optional[float] = None, session: Optional[aiohttp.ClientSession] = None):
        self.api_key = ""
        if api_key:
            self.set_api_key(api_key)
        self.timeout = timeout
        self.session = session

    @classmethod
    def from_env(cls, **kwargs: Any) -> "WarcraftLogsClient":
        """Build a client from WARCRAFTLOGS_* environment settings."""
        cfg = get_wcl_config()
        kwargs.setdefault("api_key", cfg["api_key"])
        kwargs.setdefault("timeout", cfg["timeout"])
        return cls(**kwargs)

    def set_api_key(self, key: str) -> bool:
        """Store `key` if it is non-blank. Returns False and keeps the old key otherwise."""
        if isinstance(key, str) and key.strip() != "":
            self.api_key = key
            return True
        return False

    def build_path(self, path: str, params: Optional[Mapping[str, ParamValue]] = None) -> str:
        """Return the absolute request path, query string included.

        The client's API key is written into a copy of `params` under
        ``api_key``, replacing any value the caller supplied.
        """
        qs: Dict[str, ParamValue] = dict(params) if params else {}
        qs["api_key"] = self.api_key
        return API_ROOT + encode_path(path) + "?" + serialize_params(qs)

    def _build_url(self, full_path: str) -> URL:
        # Already encoded; stop yarl from quoting a second time
        return URL(f"https://{API_HOST}:{API_PORT}{full_path}", encoded=True)

    def _new_session(self) -> aiohttp.ClientSession:
        if self.timeout is None:
            return aiohttp.ClientSession()
        return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout))

    async def request_json(self, path: str, params: Optional[Mapping[str, ParamValue]] = None) -> Any:
        """Perform GET request to the given path and return parsed JSON.

        Raises WarcraftLogsHTTPError on non-2xx responses and
        WarcraftLogsDecodeError when the body is not valid JSON. Transport
        errors from aiohttp propagate as-is.
        """
        if not path.startswith("/"):
            path = "/" + path
        url = self._build_url(self.build_path(path, params))

        if self.session is not None:
            return await self._fetch(self.session, url, path)
        async with self._new_session() as session:
            return await self._fetch(session, url, path)

    async def _fetch(self, session: aiohttp.ClientSession, url: URL, path: str) -> Any:
        async with session.get(url, headers={"cache-control": "no-cache"}) as resp:
            status = resp.status
            # Path only; the query string carries the key
            logger.info("Warcraft Logs request: GET %s -> %s", API_ROOT + path, status)

            if status < 200 or status >= 300:
                raise WarcraftLogsHTTPError(status, resp.reason, path)

            raw = await resp.read()

        try:
            text = raw.decode("utf-8")
            return json.loads(text, parse_constant=_reject_constant)
        except UnicodeDecodeError as err:
            raise WarcraftLogsDecodeError(path, raw.decode("utf-8", errors="replace"), str(err)) from err
        except ValueError as err:
            raise WarcraftLogsDecodeError(path, text, str(err)) from err


__all__ = [
    "API_HOST",
    "API_PORT",
    "API_ROOT",
    "WarcraftLogsClient",
    "WarcraftLogsError",
    "WarcraftLogsHTTPError",
    "WarcraftLogsDecodeError",
    "serialize_params",
    "encode_path",
]
