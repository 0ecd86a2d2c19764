"""Lookup[T] – outcome of asking one source for one key.

``Found`` carries a value, ``NotFound`` is the normal "ask the next
source" signal and ``Errored`` keeps the cause of a failed lookup so it
can be logged before being treated like ``NotFound``.
"""

from __future__ import annotations

from typing import Generic, NoReturn, TypeAlias, TypeVar, Union

T = TypeVar("T")


class Found(Generic[T]):
    """Lookup that produced a value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_found(self) -> bool:
        return True

    def is_errored(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Found) and other._value == self._value

    def __hash__(self) -> int:
        return hash(("found", self._value))

    def __repr__(self) -> str:
        return f"Found({self._value!r})"


class NotFound(Generic[T]):
    """Lookup that completed without a value."""

    __slots__ = ()

    def is_found(self) -> bool:
        return False

    def is_errored(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise LookupError("Called unwrap() on NotFound")

    def unwrap_or(self, default: T) -> T:
        return default

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NotFound)

    def __hash__(self) -> int:
        return hash("not_found")

    def __repr__(self) -> str:
        return "NotFound()"


class Errored(Generic[T]):
    """Lookup that failed; carries the original exception."""

    __slots__ = ("_cause",)

    def __init__(self, cause: BaseException) -> None:
        self._cause = cause

    @property
    def cause(self) -> BaseException:
        return self._cause

    def is_found(self) -> bool:
        return False

    def is_errored(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self._cause

    def unwrap_or(self, default: T) -> T:
        return default

    def __repr__(self) -> str:
        return f"Errored({self._cause!r})"


Lookup: TypeAlias = Union[Found[T], NotFound[T], Errored[T]]

__all__ = ["Errored", "Found", "Lookup", "NotFound"]
