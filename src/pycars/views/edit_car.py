"""Edit form for an existing car."""

from __future__ import annotations

import logging
from typing import Any

from pycars.client import CarsClient
from pycars.models.car import Car
from pycars.result import Err, ErrorPayload, capture
from pycars.views.base import ROOT_PATH, Navigate, ViewContainer, as_error_payload

_logger = logging.getLogger(__name__)


class EditCarView(ViewContainer):
    """Loads the car named by the ``id`` route parameter and saves edits to it.

    A failed initial load is logged only; the form stays on an empty car.
    A failed save fills :attr:`error` and stays on the screen.
    """

    def __init__(self, client: CarsClient, *, navigate: Navigate | None = None) -> None:
        super().__init__(client, navigate=navigate)
        self.car: Car = Car()
        self.error: ErrorPayload | None = None
        self.submitting = False

    async def _on_activate(self, params: dict[str, str]) -> None:
        car = await self._load_car(params)
        if car is not None:
            self.car = car
            self._notify()

    def set_fields(self, **fields: Any) -> None:
        """Edit the held car's fields; its id is left alone."""
        self.car = self.car.with_fields(**fields)
        self._notify()

    async def submit(self) -> bool:
        # Same last-resolved-wins behaviour as AddCarView.submit.
        self.submitting = True
        try:
            result = await capture(self._client.update_car(self.car))
        finally:
            self.submitting = False
        if not self._accepts("update"):
            return False
        if isinstance(result, Err):
            self.error = as_error_payload(result.error)
            self._notify()
            return False
        _logger.debug("Updated car %s", result.value.id)
        self.error = None
        self._notify()
        await self._go(ROOT_PATH)
        return True
