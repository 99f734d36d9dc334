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
"""Normalizers for standard library value types."""

from __future__ import annotations

import datetime
import decimal
import enum
import uuid
from typing import Any

from objview.serializer.context import Context


class DateTimeNormalizer:
    """``date``, ``datetime`` and ``time`` as ISO-8601 strings."""

    def normalize(self, value: datetime.date | datetime.time, context: Context | None = None) -> str:
        return value.isoformat()


class EnumNormalizer:
    """Enum members as their value."""

    def normalize(self, value: enum.Enum, context: Context | None = None) -> Any:
        return value.value


class StringNormalizer:
    """Values whose plain form is ``str(value)`` (UUIDs, decimals)."""

    def normalize(self, value: Any, context: Context | None = None) -> str:
        return str(value)


def builtin_normalizers() -> dict[type, Any]:
    """Default type -> normalizer table registered by the Serializer."""
    dates = DateTimeNormalizer()
    strings = StringNormalizer()
    return {
        datetime.date: dates,
        datetime.time: dates,
        enum.Enum: EnumNormalizer(),
        uuid.UUID: strings,
        decimal.Decimal: strings,
    }
