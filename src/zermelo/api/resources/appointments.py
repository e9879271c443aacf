"""Appointments resource for the schedule."""

from __future__ import annotations

import logging

import httpx

from zermelo.api.base import BaseResource
from zermelo.api.models import Appointment, AppointmentResponse

logger = logging.getLogger(__name__)


class AppointmentsResource(BaseResource):
    """Resource for appointment-related API calls."""

    def __init__(self, client: httpx.Client, school: str, access_token: str):
        super().__init__(client, school)
        self._access_token = access_token

    def list(self, start: int, end: int) -> list[Appointment]:
        """Get the caller's appointments within a time window.

        Args:
            start: Unix timestamp, inclusive
            end: Unix timestamp, inclusive

        Returns:
            Appointments in the order the API returned them
        """
        data = self._get(
            "/appointments",
            params={
                "user": "~me",
                "start": start,
                "end": end,
                "access_token": self._access_token,
            },
        )
        response = AppointmentResponse.from_response(data)
        logger.debug(f"Parsed {len(response.data)} appointments")
        return response.data
