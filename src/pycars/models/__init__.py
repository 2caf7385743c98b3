"""Data models for the cars API."""

from pycars.models.car import Car

__all__ = [
    "Car",
]
