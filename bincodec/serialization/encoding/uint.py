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
This module implements the rendering of non-negative integers as exact-length big-endian byte sequences.

Big-endian is the canonical order used internally, little-endian is derived from it by the `endian` module.

>>> render_uint(0x0102, 2).hex()
'0102'
>>> render_uint(1, 4).hex()
'00000001'
>>> render_uint(2**255, 32)[:2].hex()
'8000'
>>> parse_uint(bytes.fromhex('0102'))
258
>>> parse_uint(bytes.fromhex('00000001'))
1
>>> try:
...     render_uint(256, 1)
... except ValueError as e:
...     print(*e.args)
too big to encode
"""

from bincodec.serialization.types import Buffer


def render_uint(value: int, length: int) -> bytes:
    """ Render a non-negative integer as exactly `length` bytes, most significant byte first, zero padded.

    This module's docstring has more details and examples.
    """
    assert value >= 0, 'only unsigned values can be rendered, use the two\'s complement first'
    try:
        return int.to_bytes(value, length, byteorder='big', signed=False)
    except OverflowError:
        raise ValueError('too big to encode')


def parse_uint(data: Buffer) -> int:
    """ Parse a big-endian byte sequence as a non-negative integer.

    This module's docstring has more details and examples.
    """
    return int.from_bytes(data, byteorder='big', signed=False)
