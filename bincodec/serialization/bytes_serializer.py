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

from typing_extensions import override

from .serializer import Serializer
from .types import Buffer


class BytesSerializer(Serializer):
    """In-memory serializer.

    Writes are kept as a list of memoryviews and only joined when finalize is called.
    """

    def __init__(self) -> None:
        self._parts: list[memoryview] = []

    @override
    def finalize(self) -> memoryview:
        return memoryview(b''.join(self._parts))

    @override
    def write_bytes(self, data: Buffer) -> None:
        self._parts.append(memoryview(data))
