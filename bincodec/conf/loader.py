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

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

import yaml
from pydantic import BaseModel

EXTENDS_KEY = 'extends'

T = TypeVar('T', bound=BaseModel)


def merge_settings_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Return a copy of `base` updated with `override`, nested dicts are merged key by key.

    >>> merge_settings_dicts(dict(a=1, b=dict(c=2, d=3)), dict(b=dict(d=5), e=6))
    {'a': 1, 'b': {'c': 2, 'd': 5}, 'e': 6}
    """
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = merge_settings_dicts(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


def read_yaml_dict(filepath: Union[Path, str]) -> dict[str, Any]:
    """Read a yaml file that must contain a mapping, an empty file is an empty mapping."""
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f"'{filepath}' is not a file")

    with path.open('r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")
    return contents


def read_extended_yaml_dict(filepath: Union[Path, str], *, custom_root: Optional[Path] = None) -> dict[str, Any]:
    """
    Read a yaml settings file following its chain of 'extends' keys.

    The 'extends' value is resolved relative to the file that holds it, and then relative to `custom_root`. Values of
    the extending file take precedence over the extended one. The 'extends' key itself is never part of the result.
    """
    chain: list[dict[str, Any]] = []
    seen: set[Path] = set()
    path: Optional[Path] = Path(filepath)

    while path is not None:
        resolved = path.resolve()
        if resolved in seen:
            raise ValueError(f"'{filepath}' has recursive extensions")
        seen.add(resolved)

        contents = read_yaml_dict(path)
        base_file = contents.pop(EXTENDS_KEY, None)
        chain.append(contents)

        if not base_file:
            path = None
            continue

        base_path = path.parent / str(base_file)
        if not base_path.is_file() and custom_root is not None:
            base_path = custom_root / str(base_file)
        path = base_path

    settings: dict[str, Any] = {}
    for contents in reversed(chain):
        settings = merge_settings_dicts(settings, contents)
    return settings


def load_yaml_settings(model: type[T], *, filepath: Union[Path, str], custom_root: Optional[Path] = None) -> T:
    """Load a yaml settings file (following 'extends') and return a validated instance of the pydantic `model`."""
    return model.model_validate(read_extended_yaml_dict(filepath, custom_root=custom_root))
