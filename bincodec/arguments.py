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
Conversion of the loosely typed arguments of the binary functions into the values the encodings operate on.

Numeric arguments are a closed set: `int`, `float` (truncated toward zero) and `Byte`. Byte arrays are either a
bytes-like object or a sequence whose elements are `Byte` or `int` values in 0-255.

>>> to_magnitude(42, function_name='f()')
Ok(42)
>>> to_magnitude(-7.9, function_name='f()')
Ok(-7)
>>> to_magnitude(Byte(200), function_name='f()')
Ok(200)
>>> to_magnitude('42', function_name='f()')
Err(ArgumentTypeError('f() requires an integer argument'))

>>> to_byte_buffer([1, Byte(2)], 2, function_name='f()')
Ok(b'\\x01\\x02')
>>> to_byte_buffer([1, 256], 2, function_name='f()')
Err(ElementRangeError('f() byte at index 1 out of range (0-255)'))
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeAlias

from bincodec.error_codes import ErrorCode
from bincodec.exception import ArgumentTypeError, BinCodecError, ElementRangeError, LengthError
from bincodec.utils.result import Err, Ok, Result


@dataclass(frozen=True, slots=True)
class Byte:
    """A single byte, an unsigned value in 0-255 that is accepted wherever a byte array element is expected."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f'expected int, got {type(self.value).__name__}')
        if not 0 <= self.value <= 255:
            raise ValueError(f'byte value {self.value} out of range (0-255)')

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


NumericArgument: TypeAlias = int | float | Byte


def to_magnitude(arg: object, *, function_name: str) -> Result[int, ArgumentTypeError]:
    """ Convert a numeric argument to the integer to be encoded.

    Floats are truncated toward zero (7.9 -> 7, -7.9 -> -7), never rounded. Booleans are not numbers here, and neither
    are NaN or the infinities since they have no integer to truncate to.
    """
    match arg:
        case bool():
            pass
        case Byte(value=value):
            return Ok(value)
        case int():
            return Ok(int(arg))
        case float() if math.isfinite(arg):
            return Ok(math.trunc(arg))
    return Err(ArgumentTypeError(f'{function_name} requires an integer argument'))


def to_float(arg: object, *, function_name: str) -> Result[float, BinCodecError]:
    """ Convert a numeric argument to the float to be encoded.

    Integers are converted to the nearest float, or to an infinity of the same sign when they are too large for one.
    `Byte` is not accepted.
    """
    match arg:
        case bool():
            pass
        case float():
            return Ok(arg)
        case int():
            try:
                return Ok(float(arg))
            except OverflowError:
                return Ok(math.copysign(math.inf, arg))
    return Err(ArgumentTypeError(f'{function_name} requires a float or integer argument'))


def to_byte_buffer(arg: object, expected_len: int, *, function_name: str) -> Result[bytes, BinCodecError]:
    """ Convert a byte array argument to `bytes` of exactly `expected_len` bytes.

    Checks happen in a fixed order: the container type, then its length, then every element in index order. The first
    failing element decides the error and no partial buffer is ever returned.
    """
    match arg:
        case bytes() | bytearray() | memoryview():
            data = bytes(arg)
            if len(data) != expected_len:
                return Err(_length_error(function_name, expected_len, len(data)))
            return Ok(data)
        case str():
            pass
        case Sequence():
            if len(arg) != expected_len:
                return Err(_length_error(function_name, expected_len, len(arg)))
            return _elements_to_bytes(arg, function_name=function_name)
    return Err(ArgumentTypeError(
        f'{function_name} requires a byte array argument',
        code=ErrorCode.REQUIRES_ARRAY,
    ))


def _length_error(function_name: str, expected: int, actual: int) -> LengthError:
    return LengthError(
        f'{function_name} requires exactly {expected} bytes, got {actual}',
        expected=expected,
        actual=actual,
    )


def _elements_to_bytes(elements: Sequence[object], *, function_name: str) -> Result[bytes, BinCodecError]:
    buffer = bytearray()
    for index, element in enumerate(elements):
        match element:
            case bool():
                return Err(ArgumentTypeError(f'{function_name} requires a byte array', code=ErrorCode.REQUIRES_ARRAY))
            case Byte(value=value):
                buffer.append(value)
            case int() if 0 <= element <= 255:
                buffer.append(element)
            case int():
                return Err(ElementRangeError(
                    f'{function_name} byte at index {index} out of range (0-255)',
                    index=index,
                    value=element,
                ))
            case _:
                return Err(ArgumentTypeError(f'{function_name} requires a byte array', code=ErrorCode.REQUIRES_ARRAY))
    return Ok(bytes(buffer))
