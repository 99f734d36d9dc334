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
"""Encoders turning normalized records into text and back."""

from __future__ import annotations

import json
from typing import Any, Protocol, runtime_checkable

import yaml  # type: ignore[import-untyped]


@runtime_checkable
class EncoderInterface(Protocol):
    """Codec for one wire format."""

    format: str

    def encode(self, data: Any) -> str: ...
    def decode(self, payload: str) -> Any: ...


class JsonEncoder:
    format = "json"

    def __init__(self, indent: int | None = None) -> None:
        self._indent = indent

    def encode(self, data: Any) -> str:
        return json.dumps(data, indent=self._indent, ensure_ascii=False)

    def decode(self, payload: str) -> Any:
        return json.loads(payload)


class YamlEncoder:
    """YAML codec; mapping key order is preserved."""

    format = "yaml"

    def encode(self, data: Any) -> str:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)

    def decode(self, payload: str) -> Any:
        return yaml.safe_load(payload)
