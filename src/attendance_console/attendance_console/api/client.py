from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import requests

from ..core.exceptions import ApiError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackendConfig:
    base_url: str
    timeout: float = 10.0


class BackendClient:
    """Thin JSON client over the attendance backend.

    No retry, no caching, no auth: every call is a single request and any
    non-2xx answer or transport failure becomes an ``ApiError``.
    """

    def __init__(self, config: BackendConfig, *, session: Optional[requests.Session] = None):
        self._base_url = config.base_url.rstrip("/")
        self._timeout = config.timeout
        self._session = session or requests.Session()

    def url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def get(self, path: str, *, params: Optional[Mapping[str, Any]] = None, fallback: str = "Failed to fetch data") -> Any:
        return self._request("GET", path, params=params, fallback=fallback)

    def post(self, path: str, *, json: Optional[Mapping[str, Any]] = None, fallback: str = "Request failed") -> Any:
        return self._request("POST", path, json=json, fallback=fallback)

    def put(self, path: str, *, json: Optional[Mapping[str, Any]] = None, fallback: str = "Request failed") -> Any:
        return self._request("PUT", path, json=json, fallback=fallback)

    def delete(self, path: str, *, fallback: str = "Request failed") -> Any:
        return self._request("DELETE", path, fallback=fallback)

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Optional[Mapping[str, Any]] = None,
        fallback: str,
    ) -> Any:
        # Drop unset query params so optional filters are simply omitted
        clean_params = {k: v for k, v in (params or {}).items() if v is not None and v != ""}
        logger.debug("%s %s params=%s", method, path, clean_params)

        try:
            resp = self._session.request(
                method,
                self.url(path),
                params=clean_params or None,
                json=json,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise ApiError(fallback) from e

        body = _json_or_none(resp)
        if not resp.ok:
            message = _message_from(body) or fallback
            logger.warning("%s %s -> %s %s", method, path, resp.status_code, message)
            raise ApiError(message, status_code=resp.status_code)

        return body


def _json_or_none(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return None


def _message_from(body: Any) -> Optional[str]:
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return None
