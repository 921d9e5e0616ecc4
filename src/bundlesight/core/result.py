"""
Ok/Err result values.

Ingest returns failures as values so callers can tell an unusable stats
document apart from a valid but empty report without catching exceptions.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self):
        raise ValueError(f"Expected an error, got Ok({self.value!r})")

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        """Transform the success value."""
        return Ok(func(self.value))


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise ValueError(f"Expected a value, got Err({self.error})")

    def unwrap_err(self) -> E:
        return self.error

    def map(self, func: Callable) -> "Err[E]":
        """Errors pass through unchanged."""
        return self


Result = Union[Ok[T], Err[E]]
