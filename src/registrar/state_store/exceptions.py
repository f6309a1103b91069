"""Custom exceptions for State Store."""


class StateStoreError(Exception):
    """Base exception for State Store errors."""


class RecordExistsError(StateStoreError):
    """A catalog record with the same unique fields already exists."""
