"""HTTP client for the Zermelo API."""

from typing import Any

import httpx

from zermelo.api.models import Appointment
from zermelo.api.resources import AppointmentsResource, OAuthResource
from zermelo.config import get_settings, validate_school_code


class ZermeloClient:
    """Synchronous HTTP client for one school's Zermelo portal.

    Use as a context manager. A caller supplied ``http_client`` is used as
    is and left open on exit; otherwise a client is created on enter and
    closed on exit.
    """

    def __init__(
        self,
        school: str,
        token: str | None = None,
        http_client: httpx.Client | None = None,
        timeout: float | None = None,
    ):
        self.school = validate_school_code(school)
        self.token = token
        self._client: httpx.Client | None = http_client
        self._owns_client = http_client is None
        self._timeout = timeout if timeout is not None else get_settings().timeout

    def __enter__(self) -> "ZermeloClient":
        """Enter context manager, creating HTTP client."""
        if self._owns_client:
            kwargs: dict[str, Any] = {}
            if self._timeout is not None:
                kwargs["timeout"] = self._timeout
            self._client = httpx.Client(
                headers={
                    "Accept": "application/json",
                    "User-Agent": get_settings().user_agent,
                },
                **kwargs,
            )
        return self

    def __exit__(self, *args) -> None:
        """Exit context manager, closing HTTP client."""
        if self._owns_client and self._client:
            self._client.close()
            self._client = None

    def _check_client(self) -> httpx.Client:
        """Ensure client is initialized."""
        if self._client is None:
            raise RuntimeError("Client not initialized - use 'with' context manager")
        return self._client

    @property
    def oauth(self) -> OAuthResource:
        """Token endpoint."""
        return OAuthResource(self._check_client(), self.school)

    @property
    def appointments(self) -> AppointmentsResource:
        """Appointments endpoint for the authenticated user."""
        client = self._check_client()
        if self.token is None:
            raise RuntimeError("No access token - exchange a code first")
        return AppointmentsResource(client, self.school, self.token)

    def exchange_code(self, code: str) -> str:
        """Exchange an authorization code and remember the access token."""
        self.token = self.oauth.exchange(code)
        return self.token

    def get_appointments(self, start: int, end: int) -> list[Appointment]:
        """Get appointments between two Unix timestamps, in API order."""
        return self.appointments.list(start, end)
