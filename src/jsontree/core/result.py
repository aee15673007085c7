"""
Ok/Err values for parse outcomes.

parse_with_recovery and the generate pipeline return one of these instead
of raising, so the CLI can choose between an error envelope and a message.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


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
        raise ValueError(f"Result is Ok, not Err: {self.value!r}")


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failure carrying a diagnostic, usually a ParseError."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise ValueError(f"Result is Err: {self.error}")

    def unwrap_err(self) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]
