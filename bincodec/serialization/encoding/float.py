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
This module implements encoding of IEEE 754 floating point numbers in the binary32 (`f32`) and binary64 (`f64`)
formats, in either byte order.

Numbers are rounded to the nearest value of the format, finite numbers too large for it become an infinity of the
same sign, like a plain C cast would do.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.5, width=32)
>>> encode_float(se, -2.0, width=64, byteorder='little')
>>> encode_float(se, 1e300, width=32)  # writes 7f800000
>>> bytes(se.finalize()).hex()
'3fc0000000000000000000c07f800000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('3fc0000000000000000000c07f800000'))
>>> decode_float(de, width=32)
1.5
>>> decode_float(de, width=64, byteorder='little')
-2.0
>>> decode_float(de, width=32)
inf
>>> de.finalize()
"""

import math
import struct
from typing import Final

from bincodec.serialization import Deserializer, Serializer
from bincodec.serialization.encoding.endian import STRUCT_BYTE_ORDER, ByteOrder

FLOAT_WIDTHS: Final[tuple[int, ...]] = (32, 64)

_STRUCT_FORMATS: Final[dict[int, str]] = {
    32: 'f',
    64: 'd',
}


def check_float_width(width: int) -> None:
    """Raise ValueError when `width` is not one of the supported floating point widths."""
    if width not in FLOAT_WIDTHS:
        raise ValueError(f'unsupported float width {width}, expected one of {FLOAT_WIDTHS}')


def encode_float(serializer: Serializer, number: float, *, width: int, byteorder: ByteOrder = 'big') -> None:
    """ Encode a float using the binary32 or binary64 format.

    This module's docstring has more details and examples.
    """
    struct_format = STRUCT_BYTE_ORDER[byteorder] + _STRUCT_FORMATS[width]
    try:
        data = struct.pack(struct_format, number)
    except OverflowError:
        # struct refuses to round a finite number to infinity
        data = struct.pack(struct_format, math.copysign(math.inf, number))
    serializer.write_bytes(data)


def decode_float(deserializer: Deserializer, *, width: int, byteorder: ByteOrder = 'big') -> float:
    """ Decode a float from the binary32 or binary64 format.

    This module's docstring has more details and examples.
    """
    value, = deserializer.read_struct(STRUCT_BYTE_ORDER[byteorder] + _STRUCT_FORMATS[width])
    return value
