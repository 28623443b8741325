#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

"""
A `Result` type modeled after Rust's, used to return errors as values.

>>> Ok(1).map(lambda x: x + 1)
Ok(2)
>>> Err('boom').map(lambda x: x + 1)
Err('boom')
>>> Err('boom').unwrap_or(0)
0

Inside a function decorated with `propagate_result`, `unwrap_or_propagate()` returns the value of an `Ok` or makes
the decorated function return the `Err` as is, much like Rust's `?` operator:

>>> @propagate_result
... def add_one(result):
...     return Ok(result.unwrap_or_propagate() + 1)
>>> add_one(Ok(1))
Ok(2)
>>> add_one(Err('boom'))
Err('boom')
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Final, Generic, Literal, NoReturn, ParamSpec, TypeAlias, TypeVar

from typing_extensions import TypeIs

T = TypeVar('T', covariant=True)  # Success type
E = TypeVar('E', covariant=True)  # Error type
U = TypeVar('U')
F = TypeVar('F')
P = ParamSpec('P')


class Ok(Generic[T]):
    """The success variant, holds the returned value."""

    __slots__ = ('_value',)
    __match_args__ = ('_value',)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'Ok({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Ok) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Ok, self._value))

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def ok(self) -> T:
        return self._value

    def err(self) -> None:
        return None

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(self, f'unwrap_err() called on {self!r}')

    def unwrap_or(self, _default: U) -> T:
        return self._value

    def unwrap_or_raise(self) -> T:
        return self._value

    def unwrap_or_propagate(self) -> T:
        return self._value

    def map(self, op: Callable[[T], U]) -> Ok[U]:
        return Ok(op(self._value))

    def map_err(self, _op: Callable[[E], F]) -> Ok[T]:
        return self

    def and_then(self, op: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return op(self._value)

    def inspect_err(self, _op: Callable[[E], Any]) -> Ok[T]:
        return self


class Err(Generic[E]):
    """The failure variant, holds the error (usually an exception instance that is returned, not raised)."""

    __slots__ = ('_value',)
    __match_args__ = ('_value',)

    def __init__(self, value: E) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'Err({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Err) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Err, self._value))

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def ok(self) -> None:
        return None

    def err(self) -> E:
        return self._value

    def unwrap(self) -> NoReturn:
        exc = UnwrapError(self, f'unwrap() called on {self!r}')
        if isinstance(self._value, BaseException):
            raise exc from self._value
        raise exc

    def unwrap_err(self) -> E:
        return self._value

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_or_raise(self) -> NoReturn:
        """Raise the contained error, which must be an exception."""
        assert isinstance(self._value, BaseException), f'unwrap_or_raise() called on non-exception {self!r}'
        raise self._value

    def unwrap_or_propagate(self) -> NoReturn:
        """Return this `Err` from the nearest enclosing function decorated with `propagate_result`."""
        raise _ResultPropagationException(self)

    def map(self, _op: Callable[[T], U]) -> Err[E]:
        return self

    def map_err(self, op: Callable[[E], F]) -> Err[F]:
        return Err(op(self._value))

    def and_then(self, _op: Callable[[T], Result[U, E]]) -> Err[E]:
        return self

    def inspect_err(self, op: Callable[[E], Any]) -> Err[E]:
        """Call `op` with the error, for side effects such as logging, and return this `Err` unchanged."""
        op(self._value)
        return self


Result: TypeAlias = Ok[T] | Err[E]

# for isinstance checks
OkErr: Final = (Ok, Err)


class UnwrapError(Exception):
    """Raised when unwrapping the wrong variant, the offending result is kept in `result`."""

    def __init__(self, result: Result[Any, Any], message: str) -> None:
        super().__init__(message)
        self.result = result


class _ResultPropagationException(Exception):
    def __init__(self, err: Err[Any]) -> None:
        super().__init__('unwrap_or_propagate() used outside of a function decorated with @propagate_result')
        self.err = err


def propagate_result(f: Callable[P, Result[T, E]]) -> Callable[P, Result[T, E]]:
    """Decorator that makes `unwrap_or_propagate()` return early from `f` with the `Err`."""
    @functools.wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
        try:
            return f(*args, **kwargs)
        except _ResultPropagationException as e:
            return e.err

    return wrapper


def is_ok(result: Result[T, E]) -> TypeIs[Ok[T]]:
    return result.is_ok()


def is_err(result: Result[T, E]) -> TypeIs[Err[E]]:
    return result.is_err()
