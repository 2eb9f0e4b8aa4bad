"""Success-or-error values returned by address parsing"""

from dataclasses import dataclass
from typing import Generic, Iterable, Optional, TypeVar, cast

T = TypeVar('T')
E = TypeVar('E', bound=Exception)


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Either a value or the error that prevented producing it"""
    _value: Optional[T] = None
    _error: Optional[E] = None

    def __post_init__(self):
        if (self._value is None) == (self._error is None):
            raise ValueError("Result must have exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> 'Result[T, E]':
        return cls(_value=value)

    @classmethod
    def failure(cls, error: E) -> 'Result[T, E]':
        return cls(_error=error)

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        """Parsed value; ValueError when this is a failure"""
        if self.is_failure:
            raise ValueError("Cannot get value from failed result")
        return cast(T, self._value)

    @property
    def error(self) -> E:
        """Stored error; ValueError when this is a success"""
        if self.is_success:
            raise ValueError("Cannot get error from successful result")
        return cast(E, self._error)

    def unwrap(self) -> T:
        """Return the value or raise the stored error"""
        if self.is_failure:
            raise cast(E, self._error)
        return cast(T, self._value)

    def __bool__(self) -> bool:
        return self.is_success


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect results into a single result containing a list.

    Stops at the first failure and returns it; values gathered before it
    are dropped. Lazy iterables are only consumed up to that point.
    """
    values = []
    for result in results:
        if result.is_failure:
            return Result.failure(result.error)
        values.append(result.value)
    return Result.success(values)
