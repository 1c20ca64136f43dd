"""Thin HTTP transport wrapper: one attempt per call, JSON in and out."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

import requests
from requests import Response, Session
from requests.exceptions import RequestException


class HTTPClientError(RuntimeError):
    """Raised when the HTTP client cannot satisfy a request."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class HTTPClientConfig:
    """Configuration for the HTTP transport."""

    base_url: str
    timeout: float = 10.0
    headers: Mapping[str, str] = field(default_factory=dict)


class HTTPClient:
    """Sends a single request and decodes the JSON response.

    Without an injected ``session`` every call goes through
    :func:`requests.request`, which opens and closes its own connection.
    """

    def __init__(self, config: HTTPClientConfig, session: Optional[Session] = None) -> None:
        self._config = config
        self._session = session

    def request(self, method: str, path: str, json: Optional[Mapping[str, Any]] = None) -> Any:
        url = self._build_url(path)
        try:
            response = self._send(method.upper(), url, json)
        except RequestException as exc:
            raise HTTPClientError(f"Request to {url} failed: {exc}") from exc

        return self._handle_response(response)

    def _send(self, method: str, url: str, json: Optional[Mapping[str, Any]]) -> Response:
        kwargs: dict[str, Any] = {
            "headers": dict(self._config.headers),
            "timeout": self._config.timeout,
        }
        if json is not None:
            kwargs["json"] = dict(json)

        if self._session is None:
            return requests.request(method, url, **kwargs)
        return self._session.request(method, url, **kwargs)

    def _build_url(self, path: str) -> str:
        base = self._config.base_url.rstrip("/")
        suffix = path.lstrip("/")
        return f"{base}/{suffix}"

    @staticmethod
    def _handle_response(response: Response) -> Any:
        status = response.status_code
        if status >= 500:
            raise HTTPClientError(f"Server error {status}", status_code=status)
        if status >= 400:
            raise HTTPClientError(f"Client error {status}: {response.text}", status_code=status)
        if not 200 <= status < 300:
            raise HTTPClientError(f"Unexpected status {status}", status_code=status)

        try:
            return response.json()
        except ValueError as exc:
            raise HTTPClientError("Invalid JSON response", status_code=status) from exc
