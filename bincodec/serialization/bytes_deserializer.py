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

from .deserializer import Deserializer
from .exceptions import OutOfDataError, TrailingDataError
from .types import Buffer


class BytesDeserializer(Deserializer):
    """In-memory deserializer over a memoryview that is shortened as bytes are read."""

    def __init__(self, data: Buffer) -> None:
        self._view = memoryview(data)

    @override
    def finalize(self) -> None:
        if self._view:
            raise TrailingDataError(f'{len(self._view)} bytes of trailing data')
        del self._view

    @override
    def read_bytes(self, n: int) -> memoryview:
        if n < 0:
            raise ValueError('value cannot be negative')
        if len(self._view) < n:
            raise OutOfDataError(f'not enough bytes to read, wanted {n} but {len(self._view)} are left')
        data = self._view[:n]
        self._view = self._view[n:]
        return data
