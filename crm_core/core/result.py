"""Result types for railway-oriented programming.

Handlers never raise for expected failures (missing entity, stale version,
invalid request). They return ``Failure(error)`` and callers branch on it.

Usage:
    result = await dispatcher.dispatch(GetDefaultReference(family="call_type"))
    match result:
        case Success(value=dto):
            print(dto.label)
        case Failure(error=error):
            print(error.code)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
