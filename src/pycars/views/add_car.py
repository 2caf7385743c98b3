"""New car form."""

from __future__ import annotations

import logging
from typing import Any

from pycars.client import CarsClient
from pycars.models.car import Car
from pycars.result import Err, ErrorPayload, capture
from pycars.views.base import ROOT_PATH, Navigate, ViewContainer, as_error_payload

_logger = logging.getLogger(__name__)


class AddCarView(ViewContainer):
    """Holds an unsaved draft and the errors from the last submit.

    A failed submit keeps the draft so the user can fix it and retry;
    a successful one navigates back to the list.
    """

    def __init__(self, client: CarsClient, *, navigate: Navigate | None = None) -> None:
        super().__init__(client, navigate=navigate)
        self.draft: Car = Car()
        self.error: ErrorPayload | None = None
        self.submitting = False

    def set_fields(self, **fields: Any) -> None:
        """Edit the draft's fields."""
        self.draft = self.draft.with_fields(**fields)
        self._notify()

    async def submit(self) -> bool:
        # Overlapping submits are not serialized; the last one to resolve wins.
        self.submitting = True
        try:
            result = await capture(self._client.create_car(self.draft))
        finally:
            self.submitting = False
        if not self._accepts("create"):
            return False
        if isinstance(result, Err):
            self.error = as_error_payload(result.error)
            self._notify()
            return False
        _logger.debug("Created car %s", result.value.id)
        self.error = None
        self._notify()
        await self._go(ROOT_PATH)
        return True
