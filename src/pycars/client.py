"""High-level async client for the cars API."""

from __future__ import annotations

from typing import Any

import aiohttp

from pycars._api import cars as _cars_api
from pycars._transport import HttpTransport, Transport
from pycars.config import CarsConfig
from pycars.exceptions import CarsError
from pycars.models.car import Car


class CarsClient:
    """Async client for the cars API.

    Usage::

        async with CarsClient(CarsConfig(base_url="http://localhost:8000/api")) as client:
            cars = await client.list_cars()

    The client keeps no state between calls, so one instance can be
    shared by every view.
    """

    def __init__(
        self,
        config: CarsConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config if config is not None else CarsConfig()
        self._external_session = session is not None
        self._http_session = session
        self._injected_transport = transport
        self._transport: Transport | None = None

    @property
    def config(self) -> CarsConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> CarsClient:
        if self._injected_transport is not None:
            self._transport = self._injected_transport
            return self
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise CarsError("Client not initialized. Use 'async with CarsClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Car operations
    # ------------------------------------------------------------------

    async def list_cars(self) -> list[Car]:
        """Return every car, in the order the server sent them."""
        return await _cars_api.fetch_car_list(self._require_transport())

    async def get_car(self, car_id: str) -> Car:
        """Return the car with *car_id*.

        Raises
        ------
        CarsNotFoundError
            If the server does not know *car_id*.
        """
        return await _cars_api.fetch_car(self._require_transport(), car_id)

    async def create_car(self, car: Car) -> Car:
        """Create *car* and return it with its server-assigned id.

        Raises
        ------
        CarsEntityStateError
            If *car* already has an id.
        CarsValidationError
            If the server rejected the car; ``exc.errors`` holds the
            field-level messages.
        """
        return await _cars_api.create_car(self._require_transport(), car)

    async def update_car(self, car: Car) -> Car:
        """Store *car* under its id and return the updated car.

        Raises
        ------
        CarsEntityStateError
            If *car* has no id.
        CarsValidationError
            If the server rejected the update.
        """
        return await _cars_api.update_car(self._require_transport(), car)

    async def delete_car(self, car_id: str) -> None:
        """Delete the car with *car_id*."""
        await _cars_api.delete_car(self._require_transport(), car_id)
