"""Offerings - Validated creation and scheduling of offered courses."""

from registrar.offerings.service import OfferingService
from registrar.offerings.validation import Check, run_checks

__all__ = [
    "Check",
    "OfferingService",
    "run_checks",
]
