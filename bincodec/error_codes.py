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

from enum import StrEnum, unique


@unique
class ErrorCode(StrEnum):
    """Stable codes attached to every codec failure.

    The values never change between releases, log lines and error payloads can be matched on them.
    """

    # The function was called with a number of arguments other than one.
    ARGUMENT_COUNT = 'E7001'

    # The argument is not a byte array, or one of its elements is not a byte.
    REQUIRES_ARRAY = 'E7002'

    # The argument is not a number that can be encoded.
    REQUIRES_INTEGER = 'E7004'

    # The byte array has the wrong length.
    INVALID_ARGUMENT_VALUE = 'E7010'

    # A number or a byte element is outside of the representable range.
    VALUE_OUT_OF_RANGE = 'E3022'
