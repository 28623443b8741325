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
This module implements encoding of integers with a fixed size, the size, signedness and byte order are parametrized.

Encoding checks the range first, then maps signed values to their two's complement storage, renders the storage as
big-endian bytes of the exact size and finally reorders the bytes when little-endian is requested. Decoding runs the
same steps backwards.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 0, length=1, signed=True)  # writes 00
Ok(None)
>>> encode_int(se, 255, length=1, signed=False)  # writes ff
Ok(None)
>>> encode_int(se, 1234, length=2, signed=True)  # writes 04d2
Ok(None)
>>> encode_int(se, -1234, length=2, signed=True, byteorder='little')  # writes 2efb
Ok(None)
>>> encode_int(se, 256, length=1, signed=False)  # writes nothing
Err(OutOfRangeError('value 256 out of u8 range (0 to 255)'))
>>> bytes(se.finalize()).hex()
'00ff04d22efb'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00ff04d22efb'))
>>> decode_int(de, length=1, signed=True)  # reads 00
0
>>> decode_int(de, length=1, signed=False)  # reads ff
255
>>> decode_int(de, length=2, signed=True)  # reads 04d2
1234
>>> decode_int(de, length=2, signed=True, byteorder='little')  # reads 2efb
-1234
>>> de.finalize()

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, -2, length=16, signed=True, byteorder='little')
Ok(None)
>>> bytes(se.finalize()).hex()
'feffffffffffffffffffffffffffffff'
"""

from typing import Final

from bincodec.exception import OutOfRangeError
from bincodec.serialization import Deserializer, Serializer
from bincodec.serialization.encoding.bounds import check_range
from bincodec.serialization.encoding.endian import STRUCT_BYTE_ORDER, ByteOrder, from_byte_order, to_byte_order
from bincodec.serialization.encoding.twos_complement import from_twos_complement, to_twos_complement
from bincodec.serialization.encoding.uint import parse_uint, render_uint
from bincodec.utils.result import Ok, Result, propagate_result

# `struct` format codes for the sizes that fit a native fixed-width integer, indexed by (length, signed)
_STRUCT_FORMATS: Final[dict[tuple[int, bool], str]] = {
    (2, False): 'H',
    (2, True): 'h',
    (4, False): 'I',
    (4, True): 'i',
    (8, False): 'Q',
    (8, True): 'q',
}


@propagate_result
def encode_int(
    serializer: Serializer,
    number: int,
    *,
    length: int,
    signed: bool,
    byteorder: ByteOrder = 'big',
    value_max_width: int = 64,
    bounds_max_width: int = 8,
) -> Result[None, OutOfRangeError]:
    """ Encode an int using the given byte-length, signedness and byte order.

    Nothing is written when the number is out of range, the error is returned instead. The `*_max_width` parameters
    control how much detail goes into that error message, see `check_range`.

    This module's docstring has more details and examples.
    """
    width = length * 8
    check_range(
        number,
        width=width,
        signed=signed,
        value_max_width=value_max_width,
        bounds_max_width=bounds_max_width,
    ).unwrap_or_propagate()
    unsigned = to_twos_complement(number, width) if signed else number
    data = render_uint(unsigned, length)
    serializer.write_bytes(to_byte_order(data, byteorder))
    return Ok(None)


def decode_int(deserializer: Deserializer, *, length: int, signed: bool, byteorder: ByteOrder = 'big') -> int:
    """ Decode an int using the given byte-length, signedness and byte order.

    Sizes of 2, 4 and 8 bytes are read with the fixed-width `struct` formats, other sizes go through the arbitrary
    precision path.

    This module's docstring has more details and examples.
    """
    struct_format = _STRUCT_FORMATS.get((length, signed))
    if struct_format is not None:
        value, = deserializer.read_struct(STRUCT_BYTE_ORDER[byteorder] + struct_format)
        return value

    data = from_byte_order(deserializer.read_bytes(length), byteorder)
    return from_twos_complement(parse_uint(data), length * 8, signed=signed)
