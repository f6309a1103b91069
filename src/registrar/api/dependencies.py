"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from registrar.offerings import OfferingService
from registrar.registrations import RegistrationService
from registrar.state_store import StateStore

# Global StateStore instance (initialized on app startup)
_state_store: StateStore | None = None


def init_state_store(db_path: str = "registrar.db") -> StateStore:
    """Initialize the global StateStore instance."""
    global _state_store  # noqa: PLW0603
    _state_store = StateStore(db_path)
    return _state_store


def close_state_store() -> None:
    """Close the global StateStore instance."""
    global _state_store  # noqa: PLW0603
    if _state_store is not None:
        _state_store.close()
        _state_store = None


def get_state_store() -> Generator[StateStore, None, None]:
    """Dependency that provides the StateStore instance."""
    if _state_store is None:
        raise RuntimeError("StateStore not initialized. Call init_state_store() first.")
    yield _state_store


# Type alias for dependency injection
StateStoreDep = Annotated[StateStore, Depends(get_state_store)]


def get_registration_service(store: StateStoreDep) -> RegistrationService:
    """Dependency that provides a RegistrationService bound to the StateStore."""
    return RegistrationService(store)


def get_offering_service(store: StateStoreDep) -> OfferingService:
    """Dependency that provides an OfferingService bound to the StateStore."""
    return OfferingService(store)


RegistrationServiceDep = Annotated[RegistrationService, Depends(get_registration_service)]
OfferingServiceDep = Annotated[OfferingService, Depends(get_offering_service)]
