"""Car collection endpoints: /cars and /cars/{id}.

It is internal to pycars and may change at any time.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from pycars._constants import CARS_ENDPOINT, DETAIL_KEY, ERRORS_KEY
from pycars._transport import Transport
from pycars.exceptions import CarsEntityStateError, CarsTransportError, CarsValidationError
from pycars.models.car import Car

_logger = logging.getLogger(__name__)


def _car_endpoint(car_id: str) -> str:
    car_id = str(car_id)
    if not car_id.strip():
        raise CarsEntityStateError("car id must be non-empty")
    return f"{CARS_ENDPOINT}/{quote(car_id, safe='')}"


def _parse_car(endpoint: str, decoded: Any) -> Car:
    if not isinstance(decoded, dict):
        raise CarsTransportError(
            f"Expected a JSON object from {endpoint}, got {type(decoded).__name__}",
            endpoint=endpoint,
            body=decoded,
        )
    return Car.model_validate(decoded)


def _normalize_write_error(exc: CarsTransportError) -> CarsValidationError:
    """Log the raw failure and reshape it for field-level display.

    The server's ``errors`` mapping is forwarded when present; anything
    else (network failure, unstructured body) becomes ``{"detail": ...}``.
    """
    _logger.error("Write to %s failed", exc.endpoint, exc_info=exc)
    body = exc.body
    errors: dict[str, Any]
    if isinstance(body, dict) and isinstance(body.get(ERRORS_KEY), dict):
        errors = dict(body[ERRORS_KEY])
    elif isinstance(body, dict) and body.get(ERRORS_KEY) is not None:
        errors = {DETAIL_KEY: body[ERRORS_KEY]}
    else:
        errors = {DETAIL_KEY: str(exc)}
    return CarsValidationError(
        f"{exc.endpoint} rejected: {errors}",
        errors=errors,
        status_code=exc.status_code,
        endpoint=exc.endpoint,
    )


async def fetch_car_list(transport: Transport) -> list[Car]:
    """Fetch every car, in server order."""
    decoded = await transport.request("GET", CARS_ENDPOINT)
    if not isinstance(decoded, list):
        raise CarsTransportError(
            f"Expected a JSON array from {CARS_ENDPOINT}, got {type(decoded).__name__}",
            endpoint=CARS_ENDPOINT,
            body=decoded,
        )
    return [_parse_car(CARS_ENDPOINT, item) for item in decoded]


async def fetch_car(transport: Transport, car_id: str) -> Car:
    """Fetch one car by id.

    Raises :class:`~pycars.exceptions.CarsNotFoundError` when the server
    does not know *car_id*.
    """
    endpoint = _car_endpoint(car_id)
    decoded = await transport.request("GET", endpoint)
    return _parse_car(endpoint, decoded)


async def create_car(transport: Transport, car: Car) -> Car:
    """Create *car* (which must not have an id) and return the stored car."""
    if car.is_persisted:
        raise CarsEntityStateError(f"car {car.id} already exists; use update instead")
    try:
        decoded = await transport.request("POST", CARS_ENDPOINT, car.to_payload())
    except CarsTransportError as exc:
        raise _normalize_write_error(exc) from exc
    created = _parse_car(CARS_ENDPOINT, decoded)
    if not created.is_persisted:
        raise CarsTransportError(
            f"{CARS_ENDPOINT} returned a car without an id",
            endpoint=CARS_ENDPOINT,
            body=decoded,
        )
    return created


async def update_car(transport: Transport, car: Car) -> Car:
    """Replace the stored car addressed by ``car.id`` and return it.

    A 2xx response without a body echoes *car* back unchanged.
    """
    if car.id is None:
        raise CarsEntityStateError("cannot update a car that has no id; use create instead")
    endpoint = _car_endpoint(car.id)
    try:
        decoded = await transport.request("PUT", endpoint, car.to_payload())
    except CarsTransportError as exc:
        raise _normalize_write_error(exc) from exc
    if decoded is None:
        return car
    return _parse_car(endpoint, decoded)


async def delete_car(transport: Transport, car_id: str) -> None:
    """Delete the car with *car_id*; any response body is ignored."""
    await transport.request("DELETE", _car_endpoint(car_id))
