"""View-state containers, one per screen."""

from pycars.views.add_car import AddCarView
from pycars.views.base import ViewContainer
from pycars.views.car_detail import CarDetailView
from pycars.views.car_list import CarListView
from pycars.views.edit_car import EditCarView

__all__ = [
    "AddCarView",
    "CarDetailView",
    "CarListView",
    "EditCarView",
    "ViewContainer",
]
