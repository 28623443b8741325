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
This module was made to hold the encodings of the fixed-width binary formats.

Each submodule deals with a single concern of the codec and the `int` and `float` submodules compose them onto a
serializer or a deserializer:

    def encode_x(serializer: Serializer, value: ValueType, ...config params...) -> Result[None, ...]:
        ...

    def decode_x(deserializer: Deserializer, ...config params...) -> ValueType:
        ...

The pieces used by the integer formats are kept separate (`bounds`, `twos_complement`, `uint`, `endian`) so they can
be reasoned about on their own: all of them operate on Python's arbitrary precision `int`, no width is ever squeezed
through a native machine integer.
"""
