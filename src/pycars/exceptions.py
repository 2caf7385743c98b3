"""Custom exception hierarchy for pycars."""

from __future__ import annotations

from typing import Any


class CarsError(Exception):
    """Base exception for all pycars errors."""


class CarsConfigError(CarsError):
    """Invalid or missing configuration."""


class CarsTransportError(CarsError):
    """HTTP-level failure (network, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
        body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        self.body = body
        super().__init__(message)


class CarsNotFoundError(CarsTransportError):
    """The requested car does not exist on the server (HTTP 404)."""


class CarsValidationError(CarsError):
    """A create or update was rejected.

    ``errors`` holds the server's field-level validation payload
    (``{"make": "required"}``) when the server sent one, otherwise a
    single ``{"detail": ...}`` entry describing the transport failure.
    """

    def __init__(
        self,
        message: str,
        *,
        errors: dict[str, Any],
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.errors = errors
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class CarsEntityStateError(CarsError, ValueError):
    """The operation does not fit the entity's persistence state.

    Raised before any request is sent, e.g. creating a car that already
    has an id or updating one that has none.
    """


class CarsRouteError(CarsError):
    """No route matches the requested path."""
