"""
connection.py - API session helpers
Single responsibility: hold the authenticated HTTP session and turn every
response into an Ok/Err result.
"""

import logging
from typing import Any

import requests

from caseboard import config
from caseboard.domain.results import Err, Ok, Result

logger = logging.getLogger(__name__)


class ApiSession:
    """Authenticated client passed explicitly to every repository."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        http: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http = http or requests.Session()
        self.http.headers.update({"Accept": "application/json"})
        self.set_token(token)

    @classmethod
    def from_config(cls, http: requests.Session | None = None) -> "ApiSession":
        return cls(
            base_url=config.API_URL,
            token=config.API_TOKEN,
            timeout=config.REQUEST_TIMEOUT_SECONDS,
            http=http,
        )

    @property
    def token(self) -> str | None:
        return self._token

    def set_token(self, token: str | None) -> None:
        self._token = token or None
        if self._token:
            self.http.headers["Authorization"] = f"Bearer {self._token}"
        else:
            self.http.headers.pop("Authorization", None)

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_json(self, path: str, params: dict | None = None) -> Result:
        url = self.url(path)
        try:
            response = self.http.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("GET %s failed: %s", url, e)
            return Err(f"Network error: {e}")

        if not 200 <= response.status_code < 300:
            reason = _error_message(response) or f"Request failed: {response.reason or 'error'}"
            logger.warning("GET %s returned %s: %s", url, response.status_code, reason)
            return Err(reason, status_code=response.status_code)

        try:
            return Ok(response.json())
        except ValueError:
            logger.warning("GET %s returned a non-JSON body", url)
            return Err("Invalid JSON in response", status_code=response.status_code)

    def close(self) -> None:
        self.http.close()


def _error_message(response: requests.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if isinstance(message, str) and message:
            return message
    return None


def extract_list(payload: Any, key: str) -> Result:
    """
    Pull the record list out of the API envelope.

    Endpoints answer with a bare list, ``{key: [...]}``, ``{"data": [...]}``
    or ``{"data": {key: [...]}}``.
    """
    if isinstance(payload, list):
        return Ok(payload)
    if isinstance(payload, dict):
        if payload.get("success") is False:
            return Err(payload.get("message") or "Request was not successful")
        if isinstance(payload.get(key), list):
            return Ok(payload[key])
        data = payload.get("data")
        if isinstance(data, list):
            return Ok(data)
        if isinstance(data, dict) and isinstance(data.get(key), list):
            return Ok(data[key])
    return Err(f"Unexpected response shape: no '{key}' list")
