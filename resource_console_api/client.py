"""Resource console API client.

This module defines a thin wrapper around the Resource Console REST
API.  It is the data-fetching side of the browser console: it issues
the CRUD and search requests and prepares records for display.  The
client uses the ``requests`` library internally.

Every operation takes a resource kind (``"users"``, ``"posts"``,
``"comments"`` or ``"products"``) and returns a tuple ``(data, error)``.
On success ``error`` is ``None``; on failure ``data`` is ``None`` (or
``False`` for deletes) and ``error`` is a dictionary with the keys
``status_code``, ``message`` and ``errors`` (the field level errors of
a 400 response, otherwise an empty list).  Failures are logged and
never raised, so callers can show the message in a notification.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from resource_console_api.app.core.resources import ResourceKind


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

# Fields never shown in the detail view.
_HIDDEN_FIELDS = {ResourceKind.USERS: ("password",)}


def displayable(kind: str, record: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``record`` without fields hidden from display.

    Users are shown without their password; other kinds unchanged.
    """
    hidden = _HIDDEN_FIELDS.get(ResourceKind(kind), ())
    return {key: value for key, value in record.items() if key not in hidden}


def title_for(kind: str, record: Dict[str, Any]) -> str:
    """Heading used for a record in the detail view."""
    kind = ResourceKind(kind)
    if kind is ResourceKind.POSTS:
        return record["title"]
    if kind is ResourceKind.COMMENTS:
        return f"Comment by {record['name']}"
    return record["name"]


class ResourceConsoleClient:
    """Client for the Resource Console API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Path prefix under which the API is mounted.
            session: Optional requests session.  Any object with a
                compatible ``request`` method works, which lets tests
                pass Starlette's ``TestClient``.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + "/" + api_prefix.strip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/users``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docs.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "errors": []}

        if response.status_code >= 400:
            message = ""
            errors: List[Any] = []
            try:
                err_json = response.json()
                message = err_json.get("message") or err_json.get("detail") or ""
                errors = err_json.get("errors") or []
            except ValueError:
                message = response.text
            if not message:
                message = f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message, "errors": errors}

        if response.content:
            return response.json(), None
        return None, None

    @staticmethod
    def _collection(kind: str) -> str:
        return f"/{ResourceKind(kind).value}"

    # ------------------------------------------------------------------
    # Resource operations
    # ------------------------------------------------------------------
    def resources(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return the resource catalogue used to build the navigation."""
        data, error = self._request("GET", "/resources")
        return data or [], error

    def list(self, kind: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", self._collection(kind))
        return data or [], error

    def get(self, kind: str, record_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{self._collection(kind)}/{record_id}")

    def create(self, kind: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a record.  ``payload`` uses the camelCase wire names."""
        return self._request("POST", self._collection(kind), json_body=payload)

    def update(
        self, kind: str, record_id: int, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Apply a partial update; omitted fields keep their values."""
        return self._request("PUT", f"{self._collection(kind)}/{record_id}", json_body=payload)

    def delete(self, kind: str, record_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"{self._collection(kind)}/{record_id}")
        return error is None, error

    def search(self, kind: str, term: str = "") -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Search one kind.  ``kind`` is sent as is so the server decides validity."""
        data, error = self._request("GET", f"/search/{kind}", params={"q": term})
        return data or [], error
