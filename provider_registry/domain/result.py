"""
Operation results - Discriminated success/error values.

Every mutating registry operation returns either Ok(value) or Err(code).
Callers branch on the discriminant (isinstance or is_ok()); outer layers
that prefer exceptions call unwrap().
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from .exceptions import error_for
from .ports import ErrorCode

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying an error code."""

    error: ErrorCode

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the domain exception matching the error code."""
        raise error_for(self.error)


Result = Union[Ok[T], Err]
