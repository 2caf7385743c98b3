"""Tagged results for transport calls made on behalf of a view.

Views never let a :class:`~pycars.exceptions.CarsError` escape; instead
they turn every call into either :class:`Ok` or :class:`Err` with
:func:`capture`.  Which error ends up in :class:`Err` depends on the
exception class:

* :class:`~pycars.exceptions.CarsValidationError` (create/update) is
  unwrapped to its ``errors`` payload so it can be rendered per field;
* any other :class:`~pycars.exceptions.CarsError` is passed through raw.
"""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

from pycars.exceptions import CarsError, CarsValidationError

T = TypeVar("T")
E = TypeVar("E")

ErrorPayload: TypeAlias = dict[str, Any]
"""Field name to message mapping, as sent back by the server."""


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    @property
    def is_ok(self) -> bool:
        return False


Result: TypeAlias = Ok[T] | Err[Any]


async def capture(call: Awaitable[T]) -> Ok[T] | Err[ErrorPayload] | Err[CarsError]:
    """Await *call* and wrap its outcome."""
    try:
        return Ok(await call)
    except CarsValidationError as exc:
        return Err(exc.errors)
    except CarsError as exc:
        return Err(exc)
