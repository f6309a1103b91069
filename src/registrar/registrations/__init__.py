"""Registrations - Semester registration lifecycle and cascade deletion."""

from registrar.registrations.cascade import CascadeDeleteCoordinator
from registrar.registrations.lifecycle import (
    ALLOWED_TRANSITIONS,
    can_transition,
    check_window,
    ensure_editable,
    ensure_no_active,
    ensure_transition,
)
from registrar.registrations.service import RegistrationService

__all__ = [
    "ALLOWED_TRANSITIONS",
    "CascadeDeleteCoordinator",
    "RegistrationService",
    "can_transition",
    "check_window",
    "ensure_editable",
    "ensure_no_active",
    "ensure_transition",
]
