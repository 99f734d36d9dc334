# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Helpers shared by the normalizers: value shape dispatch and view lookup."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from numbers import Number
from typing import Any

_PLAIN_TYPES = (str, bytes, bytearray, Number, Mapping, set, frozenset)

_MISSING = object()


class ValueKind(Enum):
    """Shape of a resolved property value, decided once per value."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    OBJECT = "object"


def value_kind(value: Any) -> ValueKind:
    """Classify ``value`` for recursion.

    ``None``, strings, numbers, mappings and sets are copied as-is. Lists and
    tuples are walked element by element. Everything else is an object whose
    properties are normalized.
    """
    if value is None or isinstance(value, _PLAIN_TYPES):
        return ValueKind.SCALAR
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.OBJECT


def is_record(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_record_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, Mapping) for item in value)


def deep_get(data: Any, path: Sequence[str]) -> Any:
    """Walk ``data`` along ``path`` and return what is found, or ``None``.

    View data mixes two forms: a mapping of ``name -> nested view`` and a list
    of names in which mapping entries carry the nested views::

        ["id", "name", {"customer": ["id", "email"]}]
    """
    current = data
    for key in path:
        if isinstance(current, Mapping):
            current = current.get(key, _MISSING)
        elif isinstance(current, (list, tuple)):
            current = next(
                (item[key] for item in current if isinstance(item, Mapping) and key in item),
                _MISSING,
            )
        else:
            return None
        if current is _MISSING:
            return None
    return current


def view_includes(view_data: Any, name: str) -> bool:
    """Whether property ``name`` is visible under resolved ``view_data``.

    Empty or non-collection view data filters nothing.
    """
    if not view_data:
        return True
    if isinstance(view_data, Mapping):
        return name in view_data
    if isinstance(view_data, (list, tuple, set, frozenset)):
        for entry in view_data:
            if entry == name or (isinstance(entry, Mapping) and name in entry):
                return True
        return False
    return True
