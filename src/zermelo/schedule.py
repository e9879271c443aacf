"""Schedule: the authenticated user's appointments for one school."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import httpx

from zermelo.api.client import ZermeloClient
from zermelo.api.models import Appointment
from zermelo.auth import exchange_code
from zermelo.config import validate_school_code

logger = logging.getLogger(__name__)


class Schedule:
    """Appointments of the authenticated user, ordered by start time.

    Create one with ``Schedule.from_code`` or ``Schedule.with_access_token``,
    then call ``fetch_appointments`` as often as needed. Every successful
    fetch replaces ``appointments``; a failed fetch leaves it untouched.

    Each fetch opens and closes its own HTTP client unless ``http_client``
    is given or the schedule is used as a context manager:

        with Schedule.with_access_token("example", token) as schedule:
            schedule.fetch_appointments(*day_bounds(date.today()))
            for appointment in schedule:
                print(appointment.summary())
    """

    def __init__(
        self,
        school: str,
        access_token: str,
        http_client: httpx.Client | None = None,
    ):
        self.school = school
        self.access_token = access_token
        self.appointments: list[Appointment] = []
        self._http_client = http_client
        self._session: ZermeloClient | None = None

    @classmethod
    def from_code(
        cls,
        school: str,
        code: str,
        http_client: httpx.Client | None = None,
    ) -> Schedule:
        """Exchange an authorization code and create a schedule with the token.

        Raises:
            ValueError: If the school code is invalid
            ZermeloAPIError: If the exchange fails; no schedule is created
        """
        access_token = exchange_code(school, code, http_client=http_client)
        return cls(school, access_token, http_client=http_client)

    @classmethod
    def with_access_token(
        cls,
        school: str,
        access_token: str,
        http_client: httpx.Client | None = None,
    ) -> Schedule:
        """Create a schedule from a token obtained earlier."""
        return cls(school, access_token, http_client=http_client)

    def __enter__(self) -> Schedule:
        """Keep one HTTP client open for all fetches inside the block.

        The block is bound to the school at entry; the access token may still
        be replaced inside it.
        """
        if self._session is not None:
            raise RuntimeError("Schedule is already open - blocks cannot be nested")
        self._session = ZermeloClient(
            self.school, self.access_token, http_client=self._http_client
        ).__enter__()
        return self

    def __exit__(self, *args) -> None:
        if self._session is not None:
            self._session.__exit__(*args)
            self._session = None

    def __iter__(self) -> Iterator[Appointment]:
        return iter(self.appointments)

    def __len__(self) -> int:
        return len(self.appointments)

    def __repr__(self) -> str:
        return f"Schedule(school={self.school!r}, appointments={len(self.appointments)})"

    def fetch_appointments(self, start: int, end: int) -> Schedule:
        """Fetch appointments between two Unix timestamps (both inclusive).

        The range is passed to the API as is; ``start <= end`` is up to
        the caller.

        Returns:
            This schedule, with ``appointments`` replaced and sorted by start
            (a missing start counts as 0; ties keep the API order)

        Raises:
            ValueError: If the school code is invalid
            RuntimeError: If ``school`` was changed inside a with block
            ZermeloAPIError: If the request or the response fails
        """
        if self._session is not None:
            if validate_school_code(self.school) != self._session.school:
                raise RuntimeError("School changed inside a with block - reopen the schedule")
            self._session.token = self.access_token
            fetched = self._session.get_appointments(start, end)
        else:
            with ZermeloClient(
                self.school, self.access_token, http_client=self._http_client
            ) as client:
                fetched = client.get_appointments(start, end)

        self.appointments = sorted(fetched, key=lambda a: a.sort_key)
        logger.debug(f"Fetched {len(self.appointments)} appointments for {self.school}")
        return self
