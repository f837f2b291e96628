"""Minimal REST client for the NetBox API."""

import json
import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)


class NetBoxError(Exception):
    """Base class for failures talking to NetBox."""


class NetBoxConnectionError(NetBoxError):
    """NetBox could not be reached (DNS, refused connection, timeout...)."""


class NetBoxAPIError(NetBoxError):
    """NetBox answered with a non-success status code."""

    def __init__(self, status_code: int, message: str, body: Any = None):
        super().__init__(f"NetBox API error {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.body = body


class NetBoxNotFoundError(NetBoxAPIError):
    """The requested object does not exist in NetBox."""


class NetBoxRestClient:
    """
    Thin wrapper around a requests session bound to one NetBox instance.

    Endpoints are given relative to the API root, e.g. "ipam/aggregates".
    The session is shared by every caller and holds no per-request state.
    """

    def __init__(
        self,
        url: str,
        token: str,
        verify_ssl: bool = True,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ):
        self.base_url = url.rstrip("/")
        if not self.base_url.endswith("/api"):
            self.base_url = f"{self.base_url}/api"
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Token {token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )

    def _url(self, endpoint: str, object_id: int | None = None) -> str:
        url = f"{self.base_url}/{endpoint.strip('/')}/"
        if object_id is not None:
            url = f"{url}{object_id}/"
        return url

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(
                method, url, verify=self.verify_ssl, timeout=self.timeout, **kwargs
            )
        except requests.RequestException as e:
            raise NetBoxConnectionError(f"{method} {url} failed: {e}") from e

        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            if isinstance(body, dict):
                message = body.get("detail") or json.dumps(body)
            else:
                message = body or response.reason
            error_class = NetBoxNotFoundError if response.status_code == 404 else NetBoxAPIError
            raise error_class(response.status_code, str(message), body)

        return response

    def get(self, endpoint: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Fetch a single object or list page.

        Args:
            endpoint: API endpoint, optionally including an object ID ("ipam/aggregates/3")
            params: Optional query parameters

        Returns:
            Decoded JSON response
        """
        return self._request("GET", self._url(endpoint), params=params).json()

    def create(self, endpoint: str, data: dict[str, Any]) -> dict[str, Any]:
        """Create an object and return it as NetBox stored it."""
        return self._request("POST", self._url(endpoint), json=data).json()

    def update(self, endpoint: str, object_id: int, data: dict[str, Any]) -> dict[str, Any]:
        """
        Replace an object.

        NetBox treats PUT as a full replacement, so ``data`` must carry every
        writable field the caller wants to keep.
        """
        return self._request("PUT", self._url(endpoint, object_id), json=data).json()

    def delete(self, endpoint: str, object_id: int) -> bool:
        """Delete an object. Returns True once NetBox has confirmed it."""
        self._request("DELETE", self._url(endpoint, object_id))
        return True
