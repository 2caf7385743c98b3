from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import unquote

import pytest

from pycars.exceptions import CarsNotFoundError, CarsTransportError


@dataclass
class FakeCarsBackend:
    """In-memory stand-in for the cars service, speaking the Transport protocol.

    Stored cars are returned with a ``_id`` key, like the reference backend.
    """

    cars: dict[str, dict[str, Any]] = field(default_factory=dict)
    calls: list[tuple[str, str]] = field(default_factory=list)
    reject_with: dict[str, Any] | None = None
    network_failures: set[str] = field(default_factory=set)
    gate: asyncio.Event | None = None
    _next_id: int = 1

    def seed(self, *items: dict[str, Any]) -> None:
        for item in items:
            data = dict(item)
            car_id = str(data.pop("id"))
            self.cars[car_id] = data

    def count(self, method: str, endpoint: str | None = None) -> int:
        return sum(1 for m, e in self.calls if m == method and (endpoint is None or e == endpoint))

    def _doc(self, car_id: str) -> dict[str, Any]:
        return {"_id": car_id, **self.cars[car_id]}

    def _lookup(self, endpoint: str) -> str:
        car_id = unquote(endpoint.split("/", 2)[2])
        if car_id not in self.cars:
            raise CarsNotFoundError(
                f"HTTP 404 from {endpoint}",
                status_code=404,
                endpoint=endpoint,
                body={"message": "Car not found"},
            )
        return car_id

    def _maybe_reject(self, endpoint: str) -> None:
        if self.reject_with is not None:
            raise CarsTransportError(
                f"HTTP 400 from {endpoint}",
                status_code=400,
                endpoint=endpoint,
                body=self.reject_with,
            )

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        self.calls.append((method, endpoint))
        if self.gate is not None:
            await self.gate.wait()
        if method in self.network_failures:
            raise CarsTransportError(f"{method} {endpoint} failed: connection refused", endpoint=endpoint)

        if endpoint == "/cars":
            if method == "GET":
                return [self._doc(car_id) for car_id in self.cars]
            if method == "POST":
                self._maybe_reject(endpoint)
                data = dict(payload or {})
                assert "id" not in data
                car_id = str(self._next_id)
                self._next_id += 1
                self.cars[car_id] = data
                return self._doc(car_id)

        if endpoint.startswith("/cars/"):
            car_id = self._lookup(endpoint)
            if method == "GET":
                return self._doc(car_id)
            if method == "PUT":
                self._maybe_reject(endpoint)
                data = dict(payload or {})
                data.pop("id", None)
                self.cars[car_id] = data
                return self._doc(car_id)
            if method == "DELETE":
                del self.cars[car_id]
                return {"message": "Car deleted"}

        raise AssertionError(f"Unexpected request: {method} {endpoint}")


@pytest.fixture
def backend() -> FakeCarsBackend:
    return FakeCarsBackend()
