"""Thin HTTP collaborator on top of :mod:`requests`."""
from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from .config import settings
from .errors import TransportError

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class HttpTransport:
    """Performs single, unretried requests against the TEDB base URL."""

    def __init__(
        self,
        base_url: str = settings.base_url,
        timeout: float = settings.timeout_seconds,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _check(self, response: requests.Response, url: str, *, require_body: bool) -> bytes:
        if response.status_code != 200:
            raise TransportError(
                f"the server returned http status code {response.status_code} for {url}",
                url=url,
                status_code=response.status_code,
            )
        content_type = response.headers.get("Content-Type")
        if JSON_CONTENT_TYPE not in (content_type or "").lower():
            raise TransportError(
                f"expected {JSON_CONTENT_TYPE} from {url}, got {content_type or 'no content type'}",
                url=url,
                status_code=response.status_code,
                content_type=content_type,
            )
        body = response.content
        if require_body and not body.strip():
            raise TransportError(f"empty body from {url}", url=url, status_code=response.status_code)
        logger.debug("%s answered %s with %s bytes", url, response.status_code, len(body))
        return body

    def post_json(self, path: str, payload: Any) -> bytes:
        url = self._url(path)
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(f"request to {url} failed: {exc}", url=url) from exc
        return self._check(response, url, require_body=False)

    def get_json(self, path: str) -> bytes:
        url = self._url(path)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(f"request to {url} failed: {exc}", url=url) from exc
        return self._check(response, url, require_body=True)
