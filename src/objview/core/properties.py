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
"""Serializer settings bound from the ``objview.serializer`` config section."""

from __future__ import annotations

from dataclasses import dataclass

from objview.core.config import config_properties


@config_properties(prefix="objview.serializer")
@dataclass
class SerializerProperties:
    """Settings for :class:`objview.serializer.Serializer`.

    Attributes:
        default_format: Wire format used by ``serialize``/``deserialize``
            when no format is passed.
        indent: Indentation for the JSON encoder; ``None`` emits compact output.
        builtin_normalizers: Register the datetime/enum/uuid/decimal
            normalizers on construction.
    """

    default_format: str = "json"
    indent: int | None = None
    builtin_normalizers: bool = True
