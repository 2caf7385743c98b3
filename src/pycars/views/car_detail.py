"""Read-only car screen."""

from __future__ import annotations

from pycars.client import CarsClient
from pycars.models.car import Car
from pycars.views.base import Navigate, ViewContainer


class CarDetailView(ViewContainer):
    def __init__(self, client: CarsClient, *, navigate: Navigate | None = None) -> None:
        super().__init__(client, navigate=navigate)
        self.car: Car = Car()

    async def _on_activate(self, params: dict[str, str]) -> None:
        car = await self._load_car(params)
        if car is not None:
            self.car = car
            self._notify()
