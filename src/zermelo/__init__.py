"""Client for the Zermelo school scheduling API.

Obtain an access token with an authorization code from the portal::

    schedule = Schedule.from_code("example", "1234 5678 9012")

or start from a token obtained earlier::

    schedule = Schedule.with_access_token("example", access_token)

then fetch a time window (Unix timestamps)::

    schedule.fetch_appointments(*day_bounds(date.today()))
    for appointment in schedule.appointments:
        print(appointment.summary())
"""

import logging

from zermelo._version import __version__
from zermelo.api import (
    Appointment,
    AppointmentType,
    AuthFieldMissingError,
    BodyReadError,
    MalformedResponseError,
    TransportError,
    UnexpectedStatusError,
    ZermeloAPIError,
    ZermeloClient,
)
from zermelo.auth import exchange_code, normalize_code
from zermelo.schedule import Schedule
from zermelo.utils import day_bounds, to_datetime

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Schedule",
    "ZermeloClient",
    "Appointment",
    "AppointmentType",
    "exchange_code",
    "normalize_code",
    "day_bounds",
    "to_datetime",
    "ZermeloAPIError",
    "TransportError",
    "UnexpectedStatusError",
    "BodyReadError",
    "MalformedResponseError",
    "AuthFieldMissingError",
]
