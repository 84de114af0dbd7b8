"""Exercise tracker API client.

A thin wrapper around the service's HTTP surface built on
``requests``.  Every public method returns a ``(data, error)`` tuple:
on success ``data`` holds the decoded JSON and ``error`` is ``None``;
on failure ``data`` is ``None`` and ``error`` is a dict with
``status_code`` and ``message``.  The client never raises for HTTP or
connection errors, which keeps calling code (scripts, bots) simple.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Tuple, Union

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class ExerciseTrackerAPI:
    """Client for a running Exercise Tracker API instance."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Server root, e.g. ``http://localhost:3000``.  The
                ``/api`` prefix is added by the client.
            session: Optional requests session; one is created if not
                supplied.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        url = f"{self.base_url}/api{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
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
                    message = err_json.get("message") or err_json.get("error") or str(err_json)
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
    # Operations
    # ------------------------------------------------------------------
    def hello(self) -> Result:
        return self._request("GET", "/hello")

    def create_user(self, username: str) -> Result:
        """Register ``username``; ``data`` is ``{"username", "id"}``."""
        return self._request("POST", "/users", json_body={"username": username})

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/users")
        return data or [], error

    def add_exercise(
        self,
        user_id: str,
        description: str,
        duration: int,
        on: Union[date, str, None] = None,
    ) -> Result:
        """Append an exercise; ``on`` defaults to today on the server."""
        body: Dict[str, Any] = {"description": description, "duration": duration}
        if on is not None:
            body["date"] = on.isoformat() if isinstance(on, date) else on
        return self._request("POST", f"/users/{user_id}/exercises", json_body=body)

    def get_log(
        self,
        user_id: str,
        *,
        from_date: Union[date, str, None] = None,
        to_date: Union[date, str, None] = None,
        limit: Optional[int] = None,
    ) -> Result:
        """Fetch a user's log; only the given filters are sent."""
        params: Dict[str, Any] = {}
        for key, value in (("from", from_date), ("to", to_date)):
            if value is not None:
                params[key] = value.isoformat() if isinstance(value, date) else value
        if limit is not None:
            params["limit"] = limit
        return self._request("GET", f"/users/{user_id}/logs", params=params or None)
