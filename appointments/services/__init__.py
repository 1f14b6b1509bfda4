"""Booking services."""

from .create_appointment import CreateAppointmentService
from .create_user import CreateUserService
from .list_provider_appointments import ListProviderAppointmentsService
from .list_providers import ListProvidersService

__all__ = [
    "CreateAppointmentService",
    "CreateUserService",
    "ListProviderAppointmentsService",
    "ListProvidersService",
]
