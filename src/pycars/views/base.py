"""Base class for view-state containers.

A container owns the state behind one screen.  The navigation layer
calls :meth:`ViewContainer.activate` exactly once when the container
becomes the current screen and :meth:`ViewContainer.deactivate` when it
is replaced.  Results that resolve after deactivation are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from pycars._constants import DETAIL_KEY
from pycars.client import CarsClient
from pycars.models.car import Car
from pycars.result import Err, ErrorPayload, capture

_logger = logging.getLogger(__name__)

Navigate = Callable[[str], Awaitable[Any]]
Listener = Callable[["ViewContainer"], None]

ROOT_PATH = "/"


def as_error_payload(error: Any) -> ErrorPayload:
    """Coerce an :class:`~pycars.result.Err` value to a displayable mapping."""
    if isinstance(error, dict):
        return error
    return {DETAIL_KEY: str(error)}


class ViewContainer:
    """State holder for one screen."""

    def __init__(self, client: CarsClient, *, navigate: Navigate | None = None) -> None:
        self._client = client
        self._navigate = navigate
        self._listeners: list[Listener] = []
        self._activated = False
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    async def activate(self, params: Mapping[str, str] | None = None) -> None:
        """Run the container's on-activate work with the route *params*."""
        if self._activated:
            raise RuntimeError(f"{type(self).__name__} has already been activated")
        self._activated = True
        self._active = True
        await self._on_activate(dict(params or {}))

    def deactivate(self) -> None:
        """Mark the container as torn down; pending results are discarded."""
        self._active = False

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* after every state change.  Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    async def _on_activate(self, params: dict[str, str]) -> None:
        """Hook for subclasses; the default does nothing."""

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _accepts(self, action: str) -> bool:
        if self._active:
            return True
        _logger.debug("Discarding %s result for inactive %s", action, type(self).__name__)
        return False

    async def _go(self, path: str) -> None:
        if self._navigate is not None:
            await self._navigate(path)

    async def _load_car(self, params: Mapping[str, str]) -> Car | None:
        """Fetch the car named by the ``id`` route parameter, logging failures."""
        car_id = params.get("id")
        if not car_id:
            return None
        result = await capture(self._client.get_car(car_id))
        if not self._accepts("load"):
            return None
        if isinstance(result, Err):
            _logger.error("Error fetching car %s: %s", car_id, result.error)
            return None
        return result.value
