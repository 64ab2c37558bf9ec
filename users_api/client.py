"""Users API client.

A thin wrapper around the ``/users`` resource using the ``requests``
library.  Every public method returns a tuple ``(data, error)``:
``data`` holds the parsed JSON response on success and ``error`` is
``None``; on failure ``data`` is ``None`` and ``error`` is a dictionary
with keys ``status_code`` and ``message``.  The client never raises for
HTTP or network errors, it logs them and reports them in ``error``.

Identifiers are passed through unchanged, so the same client works
against the in‑memory deployment (integer ids) and the SQLite one
(string ids).

Example::

    api = UsersAPI(base_url="http://localhost:8000")
    user, error = api.create_user("Ann", "ann@example.com")
    if error is None:
        api.update_user(user["id"], name="Annie")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

import requests


logger = logging.getLogger(__name__)

UserId = Union[int, str]
Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class UsersAPI:
    """Client for the users resource."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            api_prefix: Prefix the server mounts its router under
                (``API_PREFIX`` on the server side).
            api_key: Optional token sent as ``Authorization: Bearer``.
                The server does not check it; it is forwarded for
                deployments behind an authenticating proxy.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + api_prefix.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/users``).
            json_body: JSON body to send with the request.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all users."""
        data, error = self._request("GET", "/users")
        return data or [], error

    def create_user(self, name: str, email: str) -> Result:
        """Create a user and return it with its assigned id."""
        return self._request("POST", "/users", json_body={"name": name, "email": email})

    def get_user(self, user_id: UserId) -> Result:
        """Fetch one user.  A missing user yields a 404 error."""
        return self._request("GET", f"/users/{user_id}")

    def update_user(
        self,
        user_id: UserId,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Result:
        """Update the given fields of a user; omitted fields are left unchanged."""
        payload = {key: value for key, value in (("name", name), ("email", email)) if value is not None}
        return self._request("PUT", f"/users/{user_id}", json_body=payload)

    def delete_user(self, user_id: UserId) -> Result:
        """Delete a user.  Succeeds for unknown ids as well."""
        return self._request("DELETE", f"/users/{user_id}")
