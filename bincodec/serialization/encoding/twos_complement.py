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
This module implements the two's complement mapping between signed integers and their unsigned storage.

A negative value `v` of a `width` bits format is stored as `2**width + v`, which is computed with plain integer
addition rather than bit inversion so it holds for any width.

>>> to_twos_complement(-1, 16)
65535
>>> to_twos_complement(1234, 16)
1234
>>> to_twos_complement(-2**255, 256) == 2**255
True

>>> from_twos_complement(65535, 16, signed=True)
-1
>>> from_twos_complement(65535, 16, signed=False)
65535
>>> from_twos_complement(0x7fff, 16, signed=True)
32767
"""


def to_twos_complement(value: int, width: int) -> int:
    """ Map a signed value to its unsigned two's complement storage of `width` bits.

    The caller must have checked the value against the signed bounds of the format already.
    """
    assert -(1 << (width - 1)) <= value < (1 << width), 'value must be range checked before the transform'
    if value < 0:
        return (1 << width) + value
    return value


def from_twos_complement(unsigned: int, width: int, *, signed: bool) -> int:
    """ Map an unsigned storage of `width` bits back to its value.

    Unsigned formats return the storage unchanged, signed formats are negative when the top bit (`width - 1`) is set.
    """
    assert 0 <= unsigned < (1 << width)
    if signed and unsigned >> (width - 1):
        return unsigned - (1 << width)
    return unsigned
