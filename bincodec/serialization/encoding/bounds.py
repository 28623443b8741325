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
This module implements the bounds of the fixed-width integer formats and the range check that gates every encoding.

Unsigned formats of `width` bits hold `[0, 2**width - 1]`, signed (two's complement) formats hold
`[-2**(width - 1), 2**(width - 1) - 1]`. Python integers have arbitrary precision so the bounds are exact for every
supported width, including 256 bits.

>>> int_bounds(8, signed=True)
(-128, 127)
>>> int_bounds(16, signed=False)
(0, 65535)
>>> int_bounds(256, signed=False) == (0, 2**256 - 1)
True

>>> check_range(127, width=8, signed=True)
Ok(None)
>>> check_range(128, width=8, signed=True).err().message
'value 128 out of i8 range (-128 to 127)'
>>> check_range(-1, width=32, signed=False).err().message
'value -1 out of u32 range'
>>> check_range(2**127, width=128, signed=True).err().message
'value out of i128 range'
"""

from typing import Final

from bincodec.exception import OutOfRangeError
from bincodec.utils.result import Err, Ok, Result

SUPPORTED_WIDTHS: Final[tuple[int, ...]] = (8, 16, 32, 64, 128, 256)


def check_width(width: int) -> None:
    """Raise ValueError when `width` is not one of the supported bit widths."""
    if width not in SUPPORTED_WIDTHS:
        raise ValueError(f'unsupported width {width}, expected one of {SUPPORTED_WIDTHS}')


def int_type_name(width: int, *, signed: bool) -> str:
    """Short name of a format, as used in diagnostics: `i8`, `u256`, ..."""
    prefix = 'i' if signed else 'u'
    return f'{prefix}{width}'


def int_bounds(width: int, *, signed: bool) -> tuple[int, int]:
    """ Return the inclusive (min, max) values of an integer format.

    This module's docstring has more details and examples.
    """
    assert width > 0
    if signed:
        return -(1 << (width - 1)), (1 << (width - 1)) - 1
    else:
        return 0, (1 << width) - 1


def check_range(
    value: int,
    *,
    width: int,
    signed: bool,
    value_max_width: int = 64,
    bounds_max_width: int = 8,
) -> Result[None, OutOfRangeError]:
    """ Check that `value` is representable by the given format.

    The offending value is only part of the message for formats up to `value_max_width` bits and the bounds only for
    formats up to `bounds_max_width` bits, wider values are too long to be useful in a message.
    """
    lower_bound, upper_bound = int_bounds(width, signed=signed)
    if lower_bound <= value <= upper_bound:
        return Ok(None)

    type_name = int_type_name(width, signed=signed)
    if width <= bounds_max_width and width <= value_max_width:
        message = f'value {value} out of {type_name} range ({lower_bound} to {upper_bound})'
    elif width <= value_max_width:
        message = f'value {value} out of {type_name} range'
    else:
        message = f'value out of {type_name} range'

    return Err(OutOfRangeError(
        message,
        value=value,
        type_name=type_name,
        lower_bound=lower_bound,
        upper_bound=upper_bound,
    ))
