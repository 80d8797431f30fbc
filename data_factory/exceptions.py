"""
Exceptions raised by the factory engine.
"""

from typing import Any, Iterable, Optional


class DataFactoryError(Exception):
    """Base exception for factory errors."""
    pass


class InvalidConstruction(DataFactoryError, ValueError):
    """Raised when a Sequence is built without any slots."""
    pass


class ResolutionFailure(DataFactoryError):
    """Raised when the target type cannot be built from the resolved fields."""

    def __init__(
        self,
        message: str,
        data_object: Optional[Any] = None,
        fields: Optional[Iterable[str]] = None,
    ):
        super().__init__(message)
        self.data_object = data_object
        self.fields = sorted(fields) if fields is not None else []
