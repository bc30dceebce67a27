"""Result type for reporting per-item outcomes without raising."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar('T')
E = TypeVar('E')


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def map(self, fn: Callable[[T], Any]) -> "Result[Any, Any]":
        """Apply ``fn`` to the value; an exception turns into a Failure."""
        try:
            return Success(fn(self.value))
        except Exception as e:
            return Failure(e)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> "Failure[E]":
        return self

    def unwrap(self) -> Any:
        """Raise the stored error."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise RuntimeError(str(self.error))

    def unwrap_or(self, default: Any) -> Any:
        return default

    @property
    def message(self) -> str:
        return str(self.error)


Result = Union[Success[T], Failure[E]]
