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
"""Per-call normalization context: view selector, metadata and traversal path.

Contexts are immutable. Descending into a property returns a new context
whose navigator path is one element longer, so an exception raised deep in
a nested call never leaves a stale path behind.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from objview.serializer.metadata import MetadataCollection

ViewSelector = str | list[Any] | tuple[Any, ...] | set[str] | frozenset[str] | dict[str, Any]
"""A view name resolved against class metadata, or literal view data."""


@dataclass(frozen=True)
class Navigator:
    """Path of property names traversed from the root object."""

    path: tuple[str, ...] = ()

    def down(self, name: str) -> Navigator:
        return Navigator(self.path + (name,))

    def up(self) -> Navigator:
        return Navigator(self.path[:-1])

    def get_path(self) -> list[str]:
        return list(self.path)

    @property
    def depth(self) -> int:
        return len(self.path)


@dataclass(frozen=True)
class Context:
    """Options of one normalize/denormalize call.

    Attributes:
        view: Named view or literal view data; ``None`` disables filtering.
        metadata: Metadata collection; ``None`` disables getters, nested
            type reconstruction and coercion.
        navigator: Current traversal path.
    """

    view: ViewSelector | None = None
    metadata: MetadataCollection | None = None
    navigator: Navigator = field(default_factory=Navigator)

    def get_view(self) -> ViewSelector | None:
        return self.view

    def get_metadata_collection(self) -> MetadataCollection | None:
        return self.metadata

    def get_navigator(self) -> Navigator:
        return self.navigator

    def descend(self, name: str) -> Context:
        """Return a copy positioned one level deeper, under property ``name``."""
        return dataclasses.replace(self, navigator=self.navigator.down(name))

    def with_view(self, view: ViewSelector | None) -> Context:
        return dataclasses.replace(self, view=view)
