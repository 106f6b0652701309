"""Result primitives: a success value or an error, never both.

``Success`` and ``Failure`` form a closed union, so an impossible state (both
slots set, or neither) cannot be built. Both unpack as Go-style pairs::

    value, err = run_sync(parse)
    if err is not None:
        ...
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Literal, NoReturn, TypeIs

from errtuple.errors import InvariantViolationError, Thrown

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T]:
    """A computation that returned normally.

    ``value`` may be any object, including ``None``, ``0``, ``False`` and ``""``.
    """

    value: T

    @property
    def error(self) -> None:
        return None

    @property
    def ok(self) -> Literal[True]:
        return True

    def unwrap(self) -> T:
        return self.value

    def to_tuple(self) -> tuple[T, None]:
        return (self.value, None)

    def __iter__(self) -> Iterator[T | None]:
        return iter(self.to_tuple())


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E]:
    """A computation that failed, holding its (normalized) error."""

    error: E

    def __post_init__(self) -> None:
        if self.error is None:
            raise InvariantViolationError(
                "Failure requires an error value",
                hint="Use Success(None) for a computation that returned None.",
            )

    @property
    def value(self) -> None:
        return None

    @property
    def ok(self) -> Literal[False]:
        return False

    def unwrap(self) -> NoReturn:
        """Re-raise the held error (non-exceptions are raised as ``Thrown``)."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise Thrown(self.error)

    def to_tuple(self) -> tuple[None, E]:
        return (None, self.error)

    def __iter__(self) -> Iterator[E | None]:
        return iter(self.to_tuple())


type Result[T, E = BaseException] = Success[T] | Failure[E]
type ResultTuple[T, E = BaseException] = tuple[T, None] | tuple[None, E]


def is_success[T, E](result: Result[T, E]) -> TypeIs[Success[T]]:
    """Return True when *result* holds a value."""
    return isinstance(result, Success)


def is_failure[T, E](result: Result[T, E]) -> TypeIs[Failure[E]]:
    """Return True when *result* holds an error."""
    return isinstance(result, Failure)
