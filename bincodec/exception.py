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

from typing import ClassVar

from bincodec.error_codes import ErrorCode


class BinCodecError(Exception):
    """Base class for the errors returned (never raised) by the binary codec functions."""

    default_code: ClassVar[ErrorCode]

    def __init__(self, message: str, *, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code: ErrorCode = code if code is not None else self.default_code

    def __eq__(self, other: object) -> bool:
        return (
            type(self) is type(other)
            and isinstance(other, BinCodecError)
            and self.code == other.code
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((type(self), self.code, self.message))


class ArityError(BinCodecError):
    """Function called with a number of arguments other than exactly one"""
    default_code = ErrorCode.ARGUMENT_COUNT


class ArgumentTypeError(BinCodecError):
    """Argument is not a supported number (encode) or not a byte array of bytes (decode)"""
    default_code = ErrorCode.REQUIRES_INTEGER


class LengthError(BinCodecError):
    """Byte array length differs from the byte size of the requested format"""
    default_code = ErrorCode.INVALID_ARGUMENT_VALUE

    def __init__(self, message: str, *, expected: int, actual: int) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ElementRangeError(BinCodecError):
    """An element of a byte array is an integer outside of 0-255"""
    default_code = ErrorCode.VALUE_OUT_OF_RANGE

    def __init__(self, message: str, *, index: int, value: int) -> None:
        super().__init__(message)
        self.index = index
        self.value = value


class OutOfRangeError(BinCodecError):
    """Number outside of the inclusive bounds of the requested format"""
    default_code = ErrorCode.VALUE_OUT_OF_RANGE

    def __init__(
        self,
        message: str,
        *,
        value: int | float,
        type_name: str,
        lower_bound: int | None = None,
        upper_bound: int | None = None,
    ) -> None:
        super().__init__(message)
        self.value = value
        self.type_name = type_name
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
