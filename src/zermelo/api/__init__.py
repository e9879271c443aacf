"""API module for the Zermelo client."""

from zermelo.api.client import ZermeloClient
from zermelo.api.exceptions import (
    AuthFieldMissingError,
    BodyReadError,
    MalformedResponseError,
    TransportError,
    UnexpectedStatusError,
    ZermeloAPIError,
)
from zermelo.api.models import (
    Appointment,
    AppointmentResponse,
    AppointmentType,
    ZermeloModel,
)
from zermelo.api.resources import AppointmentsResource, OAuthResource

__all__ = [
    # Client
    "ZermeloClient",
    # Exceptions
    "ZermeloAPIError",
    "TransportError",
    "UnexpectedStatusError",
    "BodyReadError",
    "MalformedResponseError",
    "AuthFieldMissingError",
    # Base model
    "ZermeloModel",
    # Models
    "Appointment",
    "AppointmentResponse",
    "AppointmentType",
    # Resources
    "AppointmentsResource",
    "OAuthResource",
]
