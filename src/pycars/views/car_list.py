"""Car list screen."""

from __future__ import annotations

import logging

from pycars.client import CarsClient
from pycars.models.car import Car
from pycars.result import Err, capture
from pycars.views.base import Navigate, ViewContainer

_logger = logging.getLogger(__name__)


class CarListView(ViewContainer):
    """Holds the cars shown on the root screen, in server order."""

    def __init__(self, client: CarsClient, *, navigate: Navigate | None = None) -> None:
        super().__init__(client, navigate=navigate)
        self.cars: list[Car] = []

    async def _on_activate(self, params: dict[str, str]) -> None:
        await self.refresh()

    async def refresh(self) -> None:
        """Replace :attr:`cars` with a fresh listing; failures keep the old value."""
        result = await capture(self._client.list_cars())
        if not self._accepts("list"):
            return
        if isinstance(result, Err):
            _logger.error("Error fetching cars: %s", result.error)
            return
        self.cars = list(result.value)
        self._notify()

    async def delete(self, car_id: str) -> bool:
        """Delete *car_id* and drop it from :attr:`cars` without re-fetching."""
        result = await capture(self._client.delete_car(car_id))
        if not self._accepts("delete"):
            return False
        if isinstance(result, Err):
            _logger.error("Error deleting car %s: %s", car_id, result.error)
            return False
        self.cars = [car for car in self.cars if car.id != car_id]
        self._notify()
        return True
