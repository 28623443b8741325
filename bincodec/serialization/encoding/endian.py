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
This module adapts the canonical big-endian byte order to the byte order requested on the wire.

Both directions are a plain reversal of the byte sequence, so the operation is its own inverse.

>>> to_little_endian(bytes.fromhex('0102')).hex()
'0201'
>>> from_little_endian(bytes.fromhex('0201')).hex()
'0102'
>>> to_byte_order(bytes.fromhex('0102'), 'big').hex()
'0102'
>>> from_byte_order(bytes.fromhex('fffe'), 'little').hex()
'feff'
"""

from typing import Final, Literal, TypeAlias

from bincodec.serialization.types import Buffer

ByteOrder: TypeAlias = Literal['big', 'little']

BYTE_ORDERS: Final[tuple[ByteOrder, ...]] = ('big', 'little')

# `struct` prefix for each byte order, without alignment
STRUCT_BYTE_ORDER: Final[dict[ByteOrder, str]] = {
    'big': '>',
    'little': '<',
}


def check_byte_order(byteorder: str) -> None:
    """Raise ValueError when `byteorder` is neither 'big' nor 'little'."""
    if byteorder not in BYTE_ORDERS:
        raise ValueError(f'byteorder must be one of {BYTE_ORDERS}, got {byteorder!r}')


def reverse_bytes(data: Buffer) -> bytes:
    return bytes(data)[::-1]


def to_little_endian(data: Buffer) -> bytes:
    """Convert a big-endian byte sequence to little-endian."""
    return reverse_bytes(data)


def from_little_endian(data: Buffer) -> bytes:
    """Convert a little-endian byte sequence to big-endian."""
    return reverse_bytes(data)


def to_byte_order(data: Buffer, byteorder: ByteOrder) -> bytes:
    """Convert a canonical big-endian byte sequence to the requested byte order."""
    if byteorder == 'little':
        return to_little_endian(data)
    return bytes(data)


def from_byte_order(data: Buffer, byteorder: ByteOrder) -> bytes:
    """Convert a byte sequence in the given byte order to the canonical big-endian order."""
    if byteorder == 'little':
        return from_little_endian(data)
    return bytes(data)
