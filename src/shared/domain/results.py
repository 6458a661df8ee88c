"""Result kinds returned across the store and handler boundaries.

Every store and service operation returns exactly one of these instead of
raising.  Callers branch on ``ok`` and then on the concrete type:

- ``Success``: the operation completed; ``value`` carries its output.
- ``ValidationFailed``: the input was rejected before touching the store.
- ``NotFound``: the targeted entity does not exist.
- ``StoreFault``: the persistence layer failed; ``message`` is the
  underlying error text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, List, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T = None
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class ValidationFailed:
    """Field-level violations keyed by the wire field name."""

    errors: Dict[str, List[str]]
    ok: bool = field(default=False, init=False)


@dataclass(frozen=True)
class NotFound:
    id: int
    ok: bool = field(default=False, init=False)


@dataclass(frozen=True)
class StoreFault:
    message: str
    ok: bool = field(default=False, init=False)


Failure = Union[ValidationFailed, NotFound, StoreFault]
Result = Union[Success[T], ValidationFailed, NotFound, StoreFault]
