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
"""Per-class serialization metadata: getters, nested types, coercion and views.

Metadata is built once at setup and only read while normalizing.

Example::

    metadata = MetadataCollection()
    metadata.configure(Order) \\
        .attribute("total", getter="compute_total") \\
        .attribute("customer", cls=User, views=["public"]) \\
        .attribute("quantity", type="int")

The same structure can be loaded from configuration::

    objview:
      metadata:
        Order:
          attributes:
            total: {getter: compute_total}
            customer: {class: User, views: [public]}
          views:
            summary: [id, total]
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

import structlog

from objview.kernel.exceptions import MetadataException

logger = structlog.get_logger("objview.serializer.metadata")

Denormalizer = Callable[[Any, Any, Any], Any]
"""``denormalizer(raw_value, owning_object, context) -> value``."""

ViewData = list[Any] | dict[str, Any]

TypeRef = type | str

_KNOWN_KEYS = frozenset({"getter", "class", "denormalizer", "type", "views"})


@dataclass(frozen=True)
class PropertyConfiguration:
    """Configuration of a single property.

    Attributes:
        getter: Name of a public zero-argument method (or property) whose
            result replaces the property value when normalizing.
        cls: Type (or registered type name) to instantiate when a record is
            denormalized into this property.
        denormalizer: Function rebuilding the value from raw structured data.
        type: Scalar coercion tag applied when denormalizing (``"int"``,
            ``"float"``).
        views: Named views this property belongs to.
    """

    getter: str | None = None
    cls: TypeRef | None = None
    denormalizer: Denormalizer | None = None
    type: str | None = None
    views: tuple[str, ...] = ()

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        denormalizers: Mapping[str, Denormalizer] | None = None,
    ) -> PropertyConfiguration:
        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise MetadataException(
                f"Unknown property configuration keys: {', '.join(sorted(unknown))}",
                context={"keys": sorted(unknown)},
            )

        denormalizer = data.get("denormalizer")
        if isinstance(denormalizer, str):
            name = denormalizer
            denormalizer = (denormalizers or {}).get(name)
            if denormalizer is None:
                raise MetadataException(f"Unknown denormalizer '{name}'", context={"denormalizer": name})

        return cls(
            getter=data.get("getter"),
            cls=data.get("class"),
            denormalizer=denormalizer,
            type=data.get("type"),
            views=_as_views(data.get("views")),
        )


def _as_views(views: Any) -> tuple[str, ...]:
    if views is None:
        return ()
    if isinstance(views, str):
        return (views,)
    return tuple(views)


class ClassMetadata:
    """Property configurations and named views of one class."""

    def __init__(
        self,
        attributes: Mapping[str, PropertyConfiguration] | None = None,
        views: Mapping[str, ViewData] | None = None,
    ) -> None:
        self._attributes: dict[str, PropertyConfiguration] = dict(attributes or {})
        self._views: dict[str, ViewData] = dict(views or {})

    @property
    def attributes(self) -> dict[str, PropertyConfiguration]:
        return dict(self._attributes)

    @property
    def views(self) -> dict[str, ViewData]:
        return dict(self._views)

    def attribute(
        self,
        name: str,
        *,
        getter: str | None = None,
        cls: TypeRef | None = None,
        denormalizer: Denormalizer | None = None,
        type: str | None = None,
        views: list[str] | tuple[str, ...] = (),
    ) -> ClassMetadata:
        """Configure property ``name``; returns ``self`` for chaining."""
        self._attributes[name] = PropertyConfiguration(
            getter=getter,
            cls=cls,
            denormalizer=denormalizer,
            type=type,
            views=tuple(views),
        )
        return self

    def view(self, name: str, data: ViewData) -> ClassMetadata:
        """Declare view ``name`` explicitly; returns ``self`` for chaining."""
        self._views[name] = data
        return self

    def get_attribute_or_none(self, name: str) -> PropertyConfiguration | None:
        return self._attributes.get(name)

    def get_view_or_none(self, name: str) -> ViewData | None:
        """Resolve view ``name``.

        An explicitly declared view wins; otherwise the view is the list of
        properties whose configuration names it. Returns ``None`` when
        neither exists.
        """
        if name in self._views:
            return self._views[name]
        members = [prop for prop, conf in self._attributes.items() if name in conf.views]
        return members or None

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        denormalizers: Mapping[str, Denormalizer] | None = None,
    ) -> ClassMetadata:
        unknown = set(data) - {"attributes", "views"}
        if unknown:
            raise MetadataException(
                f"Unknown class metadata keys: {', '.join(sorted(unknown))}",
                context={"keys": sorted(unknown)},
            )
        attributes = {
            name: PropertyConfiguration.from_mapping(conf or {}, denormalizers)
            for name, conf in (data.get("attributes") or {}).items()
        }
        return cls(attributes=attributes, views=data.get("views") or {})


def type_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class MetadataCollection:
    """Registry of :class:`ClassMetadata` keyed by class.

    Classes are looked up by their dotted path (``module.QualName``), then by
    their qualified name, so metadata loaded from configuration by short
    class name matches too.

    The collection also holds a type registry used to build the bare
    instances that nested records are denormalized into.
    """

    def __init__(self) -> None:
        self._metadata: dict[str, ClassMetadata] = {}
        self._factories: dict[str, Callable[[], Any] | type] = {}

    def __len__(self) -> int:
        return len(self._metadata)

    def __iter__(self) -> Iterator[tuple[str, ClassMetadata]]:
        return iter(self._metadata.items())

    def __contains__(self, target: object) -> bool:
        return isinstance(target, (type, str)) and self.get_or_none(target) is not None

    def register(self, target: TypeRef, metadata: ClassMetadata) -> ClassMetadata:
        key = type_name(target) if isinstance(target, type) else target
        self._metadata[key] = metadata
        return metadata

    def configure(self, target: TypeRef) -> ClassMetadata:
        """Return the metadata of ``target``, registering an empty one first if needed."""
        existing = self.get_or_none(target)
        if existing is not None:
            return existing
        return self.register(target, ClassMetadata())

    def get_or_none(self, target: TypeRef) -> ClassMetadata | None:
        if isinstance(target, str):
            return self._metadata.get(target)
        found = self._metadata.get(type_name(target))
        if found is None:
            found = self._metadata.get(target.__qualname__)
        return found

    def register_type(self, name: str, factory: Callable[[], Any] | type) -> None:
        """Make ``name`` usable as a ``class`` reference in property configurations.

        A type registers a bare-instance factory; any other callable is
        called without arguments.
        """
        self._factories[name] = factory

    def instantiate(self, ref: TypeRef) -> Any:
        """Create an empty instance for type reference ``ref``.

        Types are instantiated bare, without running ``__init__``.
        """
        factory: Callable[[], Any] | type | None = ref if isinstance(ref, type) else self._factories.get(ref)
        if factory is None:
            raise MetadataException(f"Unknown type reference '{ref}'", context={"class": ref})
        if isinstance(factory, type):
            return factory.__new__(factory)
        return factory()

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        *,
        types: Mapping[str, type] | None = None,
        denormalizers: Mapping[str, Denormalizer] | None = None,
    ) -> MetadataCollection:
        """Build a collection from ``{class_name: {attributes, views}}`` data.

        ``types`` maps the class names used in ``data`` (and in ``class``
        references) to actual types.
        """
        collection = cls()
        types = dict(types or {})
        for name, factory in types.items():
            collection.register_type(name, factory)

        for name, class_data in data.items():
            if not isinstance(class_data, Mapping):
                raise MetadataException(f"Metadata for '{name}' must be a mapping", context={"class": name})
            metadata = ClassMetadata.from_mapping(class_data, denormalizers)
            collection.register(types.get(name, name), metadata)

        logger.debug("metadata_loaded", classes=len(collection), types=sorted(types))
        return collection
