"""Re-export all models."""

from zermelo.api.models.appointments import (
    Appointment,
    AppointmentResponse,
    AppointmentType,
)
from zermelo.api.models.base import ZermeloModel

__all__ = [
    # Base
    "ZermeloModel",
    # Appointments
    "Appointment",
    "AppointmentResponse",
    "AppointmentType",
]
