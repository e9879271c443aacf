"""API resources."""

from zermelo.api.resources.appointments import AppointmentsResource
from zermelo.api.resources.oauth import OAuthResource, normalize_code

__all__ = [
    "AppointmentsResource",
    "OAuthResource",
    "normalize_code",
]
