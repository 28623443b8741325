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
The functions of the `binary` module: fixed-width integers and IEEE 754 floats to and from byte arrays.

Every function takes exactly one argument and returns a `Result`, errors are values and are never raised:

>>> encode_i16_to_little_endian(-1)
Ok(b'\\xff\\xff')
>>> decode_i8([0xff])
Ok(-1)
>>> encode_u8(256)
Err(OutOfRangeError('value 256 out of u8 range (0 to 255)'))
>>> decode_u16_from_big_endian([1])
Err(LengthError('binary.decode_u16_from_big_endian() requires exactly 2 bytes, got 1'))
>>> encode_i32_to_big_endian()
Err(ArityError('binary.encode_i32_to_big_endian() takes exactly 1 argument'))
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from structlog import get_logger

from bincodec.arguments import to_byte_buffer, to_float, to_magnitude
from bincodec.conf.get_settings import get_global_settings
from bincodec.conf.settings import CodecSettings
from bincodec.exception import ArityError, BinCodecError
from bincodec.serialization import Deserializer, Serializer
from bincodec.serialization.encoding.bounds import check_width, int_type_name
from bincodec.serialization.encoding.endian import ByteOrder, check_byte_order
from bincodec.serialization.encoding.float import check_float_width, decode_float, encode_float
from bincodec.serialization.encoding.int import decode_int, encode_int
from bincodec.utils.result import Err, Ok, Result, propagate_result

logger = get_logger()

T = TypeVar('T')


class BinaryFunction(ABC, Generic[T]):
    """ Base class of the functions of the `binary` module.

    Instances are immutable and hold no state between calls, so they can be shared between threads freely.
    """

    def __init__(self, name: str, *, settings: Optional[CodecSettings] = None) -> None:
        self.name = name
        self._settings = settings

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.name!r})'

    @property
    def settings(self) -> CodecSettings:
        """The settings given to the constructor, or the global settings at the time of the call."""
        if self._settings is not None:
            return self._settings
        return get_global_settings()

    def qualified_name(self, settings: CodecSettings) -> str:
        """Name used in error messages, for example `binary.encode_i8()`."""
        return f'{settings.MODULE_NAME}.{self.name}()'

    def __call__(self, *args: Any) -> Result[T, BinCodecError]:
        settings = self.settings
        function_name = self.qualified_name(settings)

        result: Result[T, BinCodecError]
        if len(args) != 1:
            result = Err(ArityError(f'{function_name} takes exactly 1 argument'))
        else:
            result = self._call(args[0], function_name=function_name, settings=settings)

        if settings.LOG_ERRORS:
            result.inspect_err(lambda error: logger.debug(
                'binary call failed',
                function=function_name,
                code=str(error.code),
                error=error.message,
            ))
        return result

    @abstractmethod
    def _call(self, arg: object, *, function_name: str, settings: CodecSettings) -> Result[T, BinCodecError]:
        raise NotImplementedError


class _IntFunction(BinaryFunction[T]):
    def __init__(
        self,
        width: int,
        *,
        signed: bool,
        byteorder: ByteOrder,
        name: str,
        settings: Optional[CodecSettings] = None,
    ) -> None:
        check_width(width)
        check_byte_order(byteorder)
        super().__init__(name, settings=settings)
        self.width = width
        self.signed = signed
        self.byteorder = byteorder

    @property
    def byte_size(self) -> int:
        return self.width // 8

    @property
    def type_name(self) -> str:
        return int_type_name(self.width, signed=self.signed)


class IntEncoder(_IntFunction[bytes]):
    """Encodes an integer (or a float truncated toward zero, or a `Byte`) to exactly `width / 8` bytes."""

    def __init__(
        self,
        width: int,
        *,
        signed: bool,
        byteorder: ByteOrder,
        name: Optional[str] = None,
        settings: Optional[CodecSettings] = None,
    ) -> None:
        type_name = int_type_name(width, signed=signed)
        super().__init__(
            width,
            signed=signed,
            byteorder=byteorder,
            name=name or f'encode_{type_name}_to_{byteorder}_endian',
            settings=settings,
        )

    @propagate_result
    def _call(self, arg: object, *, function_name: str, settings: CodecSettings) -> Result[bytes, BinCodecError]:
        number = to_magnitude(arg, function_name=function_name).unwrap_or_propagate()
        serializer = Serializer.build_bytes_serializer()
        encode_int(
            serializer,
            number,
            length=self.byte_size,
            signed=self.signed,
            byteorder=self.byteorder,
            value_max_width=settings.RANGE_ERROR_VALUE_MAX_WIDTH,
            bounds_max_width=settings.RANGE_ERROR_BOUNDS_MAX_WIDTH,
        ).unwrap_or_propagate()
        return Ok(bytes(serializer.finalize()))


class IntDecoder(_IntFunction[int]):
    """Decodes exactly `width / 8` bytes to an integer."""

    def __init__(
        self,
        width: int,
        *,
        signed: bool,
        byteorder: ByteOrder,
        name: Optional[str] = None,
        settings: Optional[CodecSettings] = None,
    ) -> None:
        type_name = int_type_name(width, signed=signed)
        super().__init__(
            width,
            signed=signed,
            byteorder=byteorder,
            name=name or f'decode_{type_name}_from_{byteorder}_endian',
            settings=settings,
        )

    @propagate_result
    def _call(self, arg: object, *, function_name: str, settings: CodecSettings) -> Result[int, BinCodecError]:
        data = to_byte_buffer(arg, self.byte_size, function_name=function_name).unwrap_or_propagate()
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = decode_int(deserializer, length=self.byte_size, signed=self.signed, byteorder=self.byteorder)
        deserializer.finalize()
        return Ok(value)


class _FloatFunction(BinaryFunction[T]):
    def __init__(
        self,
        width: int,
        *,
        byteorder: ByteOrder,
        name: str,
        settings: Optional[CodecSettings] = None,
    ) -> None:
        check_float_width(width)
        check_byte_order(byteorder)
        super().__init__(name, settings=settings)
        self.width = width
        self.byteorder = byteorder

    @property
    def byte_size(self) -> int:
        return self.width // 8


class FloatEncoder(_FloatFunction[bytes]):
    """Encodes a float (or an integer converted to the nearest float) to the binary32 or binary64 format."""

    def __init__(
        self,
        width: int,
        *,
        byteorder: ByteOrder,
        name: Optional[str] = None,
        settings: Optional[CodecSettings] = None,
    ) -> None:
        super().__init__(
            width,
            byteorder=byteorder,
            name=name or f'encode_f{width}_to_{byteorder}_endian',
            settings=settings,
        )

    @propagate_result
    def _call(self, arg: object, *, function_name: str, settings: CodecSettings) -> Result[bytes, BinCodecError]:
        number = to_float(arg, function_name=function_name).unwrap_or_propagate()
        serializer = Serializer.build_bytes_serializer()
        encode_float(serializer, number, width=self.width, byteorder=self.byteorder)
        return Ok(bytes(serializer.finalize()))


class FloatDecoder(_FloatFunction[float]):
    """Decodes exactly 4 (binary32) or 8 (binary64) bytes to a float."""

    def __init__(
        self,
        width: int,
        *,
        byteorder: ByteOrder,
        name: Optional[str] = None,
        settings: Optional[CodecSettings] = None,
    ) -> None:
        super().__init__(
            width,
            byteorder=byteorder,
            name=name or f'decode_f{width}_from_{byteorder}_endian',
            settings=settings,
        )

    @propagate_result
    def _call(self, arg: object, *, function_name: str, settings: CodecSettings) -> Result[float, BinCodecError]:
        data = to_byte_buffer(arg, self.byte_size, function_name=function_name).unwrap_or_propagate()
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = decode_float(deserializer, width=self.width, byteorder=self.byteorder)
        deserializer.finalize()
        return Ok(value)


BINARY_BUILTINS: dict[str, BinaryFunction[Any]] = {}

F = TypeVar('F', bound=BinaryFunction[Any])


def _register(function: F) -> F:
    assert function.name not in BINARY_BUILTINS, f'duplicate function {function.name}'
    BINARY_BUILTINS[function.name] = function
    return function


def get_builtin(name: str, *, settings: Optional[CodecSettings] = None) -> BinaryFunction[Any]:
    """ Look up a function by name, with or without the module prefix and call parenthesis.

    `encode_i8`, `binary.encode_i8` and `binary.encode_i8()` are the same function. Raises KeyError for unknown names.
    """
    module_prefix = f'{(settings or get_global_settings()).MODULE_NAME}.'
    key = name.removesuffix('()').removeprefix(module_prefix)
    try:
        return BINARY_BUILTINS[key]
    except KeyError:
        raise KeyError(f'unknown binary function: {name}') from None


# 8-bit, the byte order of a single byte makes no difference
encode_i8 = _register(IntEncoder(8, signed=True, byteorder='big', name='encode_i8'))
decode_i8 = _register(IntDecoder(8, signed=True, byteorder='big', name='decode_i8'))
encode_u8 = _register(IntEncoder(8, signed=False, byteorder='big', name='encode_u8'))
decode_u8 = _register(IntDecoder(8, signed=False, byteorder='big', name='decode_u8'))

encode_i8_to_little_endian = _register(IntEncoder(8, signed=True, byteorder='little'))
decode_i8_from_little_endian = _register(IntDecoder(8, signed=True, byteorder='little'))
encode_u8_to_little_endian = _register(IntEncoder(8, signed=False, byteorder='little'))
decode_u8_from_little_endian = _register(IntDecoder(8, signed=False, byteorder='little'))
encode_i8_to_big_endian = _register(IntEncoder(8, signed=True, byteorder='big'))
decode_i8_from_big_endian = _register(IntDecoder(8, signed=True, byteorder='big'))
encode_u8_to_big_endian = _register(IntEncoder(8, signed=False, byteorder='big'))
decode_u8_from_big_endian = _register(IntDecoder(8, signed=False, byteorder='big'))

# 16-bit
encode_i16_to_little_endian = _register(IntEncoder(16, signed=True, byteorder='little'))
decode_i16_from_little_endian = _register(IntDecoder(16, signed=True, byteorder='little'))
encode_u16_to_little_endian = _register(IntEncoder(16, signed=False, byteorder='little'))
decode_u16_from_little_endian = _register(IntDecoder(16, signed=False, byteorder='little'))
encode_i16_to_big_endian = _register(IntEncoder(16, signed=True, byteorder='big'))
decode_i16_from_big_endian = _register(IntDecoder(16, signed=True, byteorder='big'))
encode_u16_to_big_endian = _register(IntEncoder(16, signed=False, byteorder='big'))
decode_u16_from_big_endian = _register(IntDecoder(16, signed=False, byteorder='big'))

# 32-bit
encode_i32_to_little_endian = _register(IntEncoder(32, signed=True, byteorder='little'))
decode_i32_from_little_endian = _register(IntDecoder(32, signed=True, byteorder='little'))
encode_u32_to_little_endian = _register(IntEncoder(32, signed=False, byteorder='little'))
decode_u32_from_little_endian = _register(IntDecoder(32, signed=False, byteorder='little'))
encode_i32_to_big_endian = _register(IntEncoder(32, signed=True, byteorder='big'))
decode_i32_from_big_endian = _register(IntDecoder(32, signed=True, byteorder='big'))
encode_u32_to_big_endian = _register(IntEncoder(32, signed=False, byteorder='big'))
decode_u32_from_big_endian = _register(IntDecoder(32, signed=False, byteorder='big'))

# 64-bit
encode_i64_to_little_endian = _register(IntEncoder(64, signed=True, byteorder='little'))
decode_i64_from_little_endian = _register(IntDecoder(64, signed=True, byteorder='little'))
encode_u64_to_little_endian = _register(IntEncoder(64, signed=False, byteorder='little'))
decode_u64_from_little_endian = _register(IntDecoder(64, signed=False, byteorder='little'))
encode_i64_to_big_endian = _register(IntEncoder(64, signed=True, byteorder='big'))
decode_i64_from_big_endian = _register(IntDecoder(64, signed=True, byteorder='big'))
encode_u64_to_big_endian = _register(IntEncoder(64, signed=False, byteorder='big'))
decode_u64_from_big_endian = _register(IntDecoder(64, signed=False, byteorder='big'))

# 128-bit
encode_i128_to_little_endian = _register(IntEncoder(128, signed=True, byteorder='little'))
decode_i128_from_little_endian = _register(IntDecoder(128, signed=True, byteorder='little'))
encode_u128_to_little_endian = _register(IntEncoder(128, signed=False, byteorder='little'))
decode_u128_from_little_endian = _register(IntDecoder(128, signed=False, byteorder='little'))
encode_i128_to_big_endian = _register(IntEncoder(128, signed=True, byteorder='big'))
decode_i128_from_big_endian = _register(IntDecoder(128, signed=True, byteorder='big'))
encode_u128_to_big_endian = _register(IntEncoder(128, signed=False, byteorder='big'))
decode_u128_from_big_endian = _register(IntDecoder(128, signed=False, byteorder='big'))

# 256-bit
encode_i256_to_little_endian = _register(IntEncoder(256, signed=True, byteorder='little'))
decode_i256_from_little_endian = _register(IntDecoder(256, signed=True, byteorder='little'))
encode_u256_to_little_endian = _register(IntEncoder(256, signed=False, byteorder='little'))
decode_u256_from_little_endian = _register(IntDecoder(256, signed=False, byteorder='little'))
encode_i256_to_big_endian = _register(IntEncoder(256, signed=True, byteorder='big'))
decode_i256_from_big_endian = _register(IntDecoder(256, signed=True, byteorder='big'))
encode_u256_to_big_endian = _register(IntEncoder(256, signed=False, byteorder='big'))
decode_u256_from_big_endian = _register(IntDecoder(256, signed=False, byteorder='big'))

# IEEE 754
encode_f32_to_little_endian = _register(FloatEncoder(32, byteorder='little'))
decode_f32_from_little_endian = _register(FloatDecoder(32, byteorder='little'))
encode_f64_to_little_endian = _register(FloatEncoder(64, byteorder='little'))
decode_f64_from_little_endian = _register(FloatDecoder(64, byteorder='little'))
encode_f32_to_big_endian = _register(FloatEncoder(32, byteorder='big'))
decode_f32_from_big_endian = _register(FloatDecoder(32, byteorder='big'))
encode_f64_to_big_endian = _register(FloatEncoder(64, byteorder='big'))
decode_f64_from_big_endian = _register(FloatDecoder(64, byteorder='big'))
