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
Fixed-width integers and IEEE 754 floats to and from byte arrays, with errors returned as values.

This module exports the registry of the `binary` functions and the types needed to use them, the functions
themselves live in `bincodec.binary`.
"""

from bincodec.arguments import Byte
from bincodec.binary import BINARY_BUILTINS, BinaryFunction, get_builtin
from bincodec.error_codes import ErrorCode
from bincodec.exception import (
    ArgumentTypeError,
    ArityError,
    BinCodecError,
    ElementRangeError,
    LengthError,
    OutOfRangeError,
)
from bincodec.utils.result import Err, Ok, Result
from bincodec.version import __version__

__all__ = [
    'BINARY_BUILTINS',
    'BinaryFunction',
    'get_builtin',
    'Byte',
    'ErrorCode',
    'BinCodecError',
    'ArityError',
    'ArgumentTypeError',
    'LengthError',
    'ElementRangeError',
    'OutOfRangeError',
    'Ok',
    'Err',
    'Result',
    '__version__',
]
