"""Path-based navigation between view containers.

Route patterns are ``/``-separated; a ``:name`` segment captures that
path segment as the route parameter ``name``::

    navigator = Navigator(client)
    await navigator.navigate("/edit/42")
    navigator.current  # EditCarView, loaded with car "42"
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from urllib.parse import unquote

from pycars.client import CarsClient
from pycars.exceptions import CarsRouteError
from pycars.views.add_car import AddCarView
from pycars.views.base import Navigate, ViewContainer
from pycars.views.car_detail import CarDetailView
from pycars.views.car_list import CarListView
from pycars.views.edit_car import EditCarView

_logger = logging.getLogger(__name__)

ViewFactory = Callable[[CarsClient, Navigate], ViewContainer]


def _split(path: str) -> list[str]:
    return [segment for segment in path.strip().split("?", 1)[0].split("/") if segment]


@dataclass(frozen=True, slots=True)
class Route:
    pattern: str
    factory: ViewFactory

    def match(self, path: str) -> dict[str, str] | None:
        """Return the captured parameters when *path* fits this route."""
        expected = _split(self.pattern)
        actual = _split(path)
        if len(expected) != len(actual):
            return None
        params: dict[str, str] = {}
        for want, got in zip(expected, actual):
            if want.startswith(":"):
                params[want[1:]] = unquote(got)
            elif want != got:
                return None
        return params


DEFAULT_ROUTES: tuple[Route, ...] = (
    Route("/", lambda client, navigate: CarListView(client, navigate=navigate)),
    Route("/add", lambda client, navigate: AddCarView(client, navigate=navigate)),
    Route("/view/:id", lambda client, navigate: CarDetailView(client, navigate=navigate)),
    Route("/edit/:id", lambda client, navigate: EditCarView(client, navigate=navigate)),
)


class Navigator:
    """Keeps exactly one active view container, selected by path."""

    def __init__(self, client: CarsClient, routes: Sequence[Route] | None = None) -> None:
        self._client = client
        self._routes = tuple(routes) if routes is not None else DEFAULT_ROUTES
        self._current: ViewContainer | None = None
        self._current_path: str | None = None

    @property
    def current(self) -> ViewContainer | None:
        return self._current

    @property
    def current_path(self) -> str | None:
        return self._current_path

    def resolve(self, path: str) -> tuple[Route, Mapping[str, str]]:
        for route in self._routes:
            params = route.match(path)
            if params is not None:
                return route, params
        raise CarsRouteError(f"No route matches {path!r}")

    async def navigate(self, path: str) -> ViewContainer:
        """Tear down the current container and activate the one for *path*."""
        route, params = self.resolve(path)
        previous = self._current
        if previous is not None:
            previous.deactivate()
        view = route.factory(self._client, self.navigate)
        self._current = view
        self._current_path = path
        _logger.debug("Navigating to %s (%s)", path, type(view).__name__)
        await view.activate(params)
        return view
