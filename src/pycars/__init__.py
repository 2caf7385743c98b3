"""pycars - Async Python client for a cars REST API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycars")
except PackageNotFoundError:
    __version__ = "0+local"
from pycars.client import CarsClient
from pycars.config import CarsConfig
from pycars.exceptions import (
    CarsConfigError,
    CarsEntityStateError,
    CarsError,
    CarsNotFoundError,
    CarsRouteError,
    CarsTransportError,
    CarsValidationError,
)
from pycars.models import Car
from pycars.navigation import DEFAULT_ROUTES, Navigator, Route
from pycars.result import Err, ErrorPayload, Ok, Result, capture
from pycars.views import AddCarView, CarDetailView, CarListView, EditCarView, ViewContainer

__all__ = [
    "__version__",
    "AddCarView",
    "Car",
    "CarDetailView",
    "CarListView",
    "CarsClient",
    "CarsConfig",
    "CarsConfigError",
    "CarsEntityStateError",
    "CarsError",
    "CarsNotFoundError",
    "CarsRouteError",
    "CarsTransportError",
    "CarsValidationError",
    "DEFAULT_ROUTES",
    "EditCarView",
    "Err",
    "ErrorPayload",
    "Navigator",
    "Ok",
    "Result",
    "Route",
    "ViewContainer",
    "capture",
]
