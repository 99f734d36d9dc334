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
"""ObjectNormalizer — converts objects to plain records and back.

Normalizing walks an object's properties in discovery order, filters them
through the active view, resolves each value (configured getter first, then
the property accessor) and recurses into nested objects and lists. Values
with a normalizer registered for their type are handed to that normalizer
instead.

Denormalizing writes record values back into an object, rebuilding nested
objects, running custom denormalizer functions and coercing scalars as the
class metadata declares.

Object graphs with cycles are not detected and recurse without bound.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

import structlog

from objview.kernel.exceptions import CoercionException, MethodException, PrivatePropertyException
from objview.serializer.accessor import PropertyAccessor
from objview.serializer.context import Context
from objview.serializer.metadata import ClassMetadata, PropertyConfiguration
from objview.serializer.tools import ValueKind, deep_get, is_record, is_record_list, value_kind, view_includes

logger = structlog.get_logger("objview.serializer.normalizer")


@runtime_checkable
class NormalizerInterface(Protocol):
    """Turns a value of some type into its plain representation."""

    def normalize(self, value: Any, context: Context | None = None) -> Any: ...


@runtime_checkable
class NormalizerRegistry(Protocol):
    """Source of type-specific normalizers consulted before object walking."""

    def get_normalizer(self, value: Any) -> NormalizerInterface | None: ...


def _to_int(value: Any) -> int:
    if isinstance(value, str):
        value = value.strip()
        try:
            return int(value)
        except ValueError:
            return int(float(value))
    return int(value)


def _to_float(value: Any) -> float:
    return float(value.strip() if isinstance(value, str) else value)


_COERCIONS: dict[str, Callable[[Any], Any]] = {
    "int": _to_int,
    "float": _to_float,
}


class ObjectNormalizer:
    """Generic normalizer for objects, driven by optional class metadata.

    Args:
        registry: Consulted for every nested value; a normalizer it returns
            takes priority over walking the value's properties.
    """

    def __init__(self, registry: NormalizerRegistry | None = None) -> None:
        self._registry = registry

    # ------------------------------------------------------------------
    # Normalize
    # ------------------------------------------------------------------

    def normalize(self, value: Any, context: Context | None = None) -> dict[str, Any]:
        """Return the properties of ``value`` as an ordered dict."""
        accessor = PropertyAccessor(value)
        metadata = _class_metadata(value, context)
        view_data = self._resolve_view(metadata, context)
        out: dict[str, Any] = {}

        for prop in accessor.get_properties():
            name = prop.name
            if view_data is not None and not view_includes(view_data, name):
                continue

            configuration = metadata.get_attribute_or_none(name) if metadata is not None else None
            if configuration is not None and configuration.getter is not None:
                resolved = self._call_getter(accessor, value, configuration.getter, name)
            else:
                try:
                    resolved = accessor.get(name, value)
                except PrivatePropertyException:
                    logger.debug("property_skipped", cls=accessor.class_name(), property=name, reason="private")
                    continue

            child = context.descend(name) if context is not None else None
            out[name] = self.normalize_value(resolved, child)

        return out

    def _resolve_view(self, metadata: ClassMetadata | None, context: Context | None) -> Any:
        """View data applying at the current depth, or ``None`` for no filtering."""
        if context is None or context.view is None:
            return None

        selector = context.view
        if isinstance(selector, str):
            if metadata is None:
                return None
            view_data = metadata.get_view_or_none(selector)
        else:
            view_data = selector

        return deep_get(view_data, context.navigator.path)

    @staticmethod
    def _call_getter(accessor: PropertyAccessor, target: Any, getter: str, name: str) -> Any:
        if not accessor.has_method(getter) or not accessor.is_public(getter):
            raise MethodException(getter, accessor.class_name(), name)
        return accessor.invoke(getter, target)

    def normalize_value(self, value: Any, context: Context | None) -> Any:
        """Normalize a nested value, preferring a registered type normalizer."""
        if self._registry is not None:
            normalizer = self._registry.get_normalizer(value)
            if normalizer is not None:
                logger.debug(
                    "normalizer_delegated",
                    value_type=type(value).__qualname__,
                    normalizer=type(normalizer).__qualname__,
                )
                return normalizer.normalize(value, context)

        kind = value_kind(value)
        if kind is ValueKind.OBJECT:
            return self.normalize(value, context)
        if kind is ValueKind.SEQUENCE:
            return [self.normalize_value(item, context) for item in value]
        return value

    # ------------------------------------------------------------------
    # Denormalize
    # ------------------------------------------------------------------

    def denormalize(self, data: Mapping[str, Any], target: Any, context: Context | None = None) -> Any:
        """Populate ``target`` from ``data`` and return it.

        Only keys matching a property of ``target`` are written. A failure
        aborts the call and leaves ``target`` partially populated.
        """
        accessor = PropertyAccessor(target)
        metadata = _class_metadata(target, context)

        for prop in accessor.get_properties():
            name = prop.name
            if name not in data:
                continue

            value = data[name]
            configuration = metadata.get_attribute_or_none(name) if metadata is not None else None
            if configuration is not None and context is not None:
                value = self._reconstruct(name, value, target, configuration, context)

            accessor.set(name, target, value)

        return target

    def _reconstruct(
        self,
        name: str,
        value: Any,
        target: Any,
        configuration: PropertyConfiguration,
        context: Context,
    ) -> Any:
        collection = context.metadata
        if configuration.cls is not None and collection is not None:
            if is_record(value):
                return self.denormalize(value, collection.instantiate(configuration.cls), context.descend(name))
            if is_record_list(value):
                child = context.descend(name)
                return [self.denormalize(item, collection.instantiate(configuration.cls), child) for item in value]

        if configuration.denormalizer is not None and (is_record(value) or isinstance(value, list)):
            return configuration.denormalizer(value, target, context)

        if configuration.type is not None:
            return _coerce(name, value, configuration.type)

        return value


def _class_metadata(value: Any, context: Context | None) -> ClassMetadata | None:
    if context is None or context.metadata is None:
        return None
    return context.metadata.get_or_none(type(value))


def _coerce(name: str, value: Any, type_tag: str) -> Any:
    coercion = _COERCIONS.get(type_tag)
    if coercion is None or value is None:
        return value
    try:
        coerced = coercion(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise CoercionException(name, type_tag, value) from exc
    logger.debug("value_coerced", property=name, type=type_tag)
    return coerced
