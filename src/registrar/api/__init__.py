"""REST API for Registrar."""

from registrar.api.app import create_app
from registrar.api.models import (
    APIResponse,
    OfferingCreate,
    OfferingResponse,
    OfferingUpdate,
    RegistrationCreate,
    RegistrationResponse,
    RegistrationUpdate,
)

__all__ = [
    "APIResponse",
    "OfferingCreate",
    "OfferingResponse",
    "OfferingUpdate",
    "RegistrationCreate",
    "RegistrationResponse",
    "RegistrationUpdate",
    "create_app",
]
