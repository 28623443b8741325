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

from pathlib import Path

from pydantic import field_validator

from bincodec.serialization.encoding.bounds import check_width
from bincodec.utils.pydantic import BaseModel


class CodecSettings(BaseModel):
    # Prefix of the function names used in error messages and accepted by registry lookups, as in "binary.encode_i8()".
    MODULE_NAME: str = 'binary'

    # Range errors of formats up to this many bits include the offending value, wider values are omitted.
    RANGE_ERROR_VALUE_MAX_WIDTH: int = 64

    # Range errors of formats up to this many bits also include the "(min to max)" bounds.
    RANGE_ERROR_BOUNDS_MAX_WIDTH: int = 8

    # Log every failed call at debug level.
    LOG_ERRORS: bool = False

    @field_validator('MODULE_NAME')
    @classmethod
    def _check_module_name(cls, module_name: str) -> str:
        if not all(part.isidentifier() for part in module_name.split('.')):
            raise ValueError(f'{module_name!r} is not a valid module name')
        return module_name

    @field_validator('RANGE_ERROR_VALUE_MAX_WIDTH', 'RANGE_ERROR_BOUNDS_MAX_WIDTH')
    @classmethod
    def _check_max_width(cls, width: int) -> int:
        check_width(width)
        return width

    @classmethod
    def from_yaml(cls, *, filepath: str) -> 'CodecSettings':
        """Load settings from a yaml file, relative 'extends' paths may also point to the bundled files."""
        from bincodec.conf.loader import load_yaml_settings
        return load_yaml_settings(cls, filepath=filepath, custom_root=Path(__file__).parent)
