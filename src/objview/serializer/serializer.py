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
"""Serializer — entry point tying normalizers, metadata and encoders together.

Example::

    serializer = Serializer(metadata=metadata)
    context = serializer.create_context(view="public")

    record = serializer.normalize(user, context)
    payload = serializer.serialize(user, "json", context)
    user = serializer.deserialize(payload, User, "json", serializer.create_context())
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

import structlog

from objview.core.config import Config
from objview.core.properties import SerializerProperties
from objview.kernel.exceptions import UnsupportedFormatException
from objview.serializer import builtin
from objview.serializer.context import Context, ViewSelector
from objview.serializer.encoders import EncoderInterface, JsonEncoder, YamlEncoder
from objview.serializer.metadata import Denormalizer, MetadataCollection
from objview.serializer.normalizer import NormalizerInterface, ObjectNormalizer

logger = structlog.get_logger("objview.serializer")

T = TypeVar("T")


class Serializer:
    """Holds the normalizer registry and drives conversions.

    Normalizers registered with :meth:`add_normalizer` take priority over
    the generic :class:`ObjectNormalizer` for values of their type or any
    subclass (the nearest class in the value's MRO wins).

    The registry is asked about every value, scalars included, so decimals
    and string-valued enums reach their normalizers. A normalizer registered
    for ``object`` therefore receives ints and strings as well.

    Args:
        normalizers: Initial ``type -> normalizer`` table.
        metadata: Collection used by :meth:`create_context`.
        encoders: Wire format codecs; JSON and YAML by default.
        properties: Serializer settings.
        builtin_normalizers: Register the date, enum, UUID and decimal
            normalizers. Defaults to ``properties.builtin_normalizers``.
    """

    def __init__(
        self,
        normalizers: Mapping[type, NormalizerInterface] | None = None,
        *,
        metadata: MetadataCollection | None = None,
        encoders: list[EncoderInterface] | None = None,
        properties: SerializerProperties | None = None,
        builtin_normalizers: bool | None = None,
    ) -> None:
        self._properties = properties or SerializerProperties()
        if builtin_normalizers is None:
            builtin_normalizers = self._properties.builtin_normalizers
        self._normalizers: dict[type, NormalizerInterface] = {}
        if builtin_normalizers:
            self._normalizers.update(builtin.builtin_normalizers())
        self._normalizers.update(normalizers or {})

        self._metadata = metadata
        if encoders is None:
            encoders = [JsonEncoder(indent=self._properties.indent), YamlEncoder()]
        self._encoders: dict[str, EncoderInterface] = {encoder.format: encoder for encoder in encoders}
        self._object_normalizer = ObjectNormalizer(self)

    @classmethod
    def from_config(
        cls,
        config: Config,
        *,
        types: Mapping[str, type] | None = None,
        denormalizers: Mapping[str, Denormalizer] | None = None,
    ) -> Serializer:
        """Build a serializer from ``objview.serializer`` and ``objview.metadata``."""
        properties = config.bind(SerializerProperties)
        metadata = MetadataCollection.from_mapping(
            config.get_section("objview.metadata"),
            types=types,
            denormalizers=denormalizers,
        )
        logger.info(
            "serializer_configured",
            default_format=properties.default_format,
            classes=len(metadata),
            sources=config.loaded_sources,
        )
        return cls(metadata=metadata, properties=properties)

    @property
    def metadata(self) -> MetadataCollection | None:
        return self._metadata

    @property
    def formats(self) -> list[str]:
        return sorted(self._encoders)

    def add_normalizer(self, type_: type, normalizer: NormalizerInterface) -> Serializer:
        self._normalizers[type_] = normalizer
        return self

    def get_normalizer(self, value: Any) -> NormalizerInterface | None:
        """Return the normalizer registered for ``value``'s type, or ``None``."""
        for klass in type(value).__mro__:
            normalizer = self._normalizers.get(klass)
            if normalizer is not None:
                return normalizer
        return None

    def create_context(self, view: ViewSelector | None = None) -> Context:
        return Context(view=view, metadata=self._metadata)

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------

    def normalize(self, value: Any, context: Context | None = None) -> Any:
        """Normalize an object, a list of objects or a plain value."""
        return self._object_normalizer.normalize_value(value, context)

    def denormalize(self, data: Any, target: type[T] | T, context: Context | None = None) -> Any:
        """Populate ``target`` from ``data``.

        ``target`` may be an instance or a class. With a class, a bare
        instance is created; list data yields a list of instances.
        """
        if not isinstance(target, type):
            return self._object_normalizer.denormalize(data, target, context)

        if isinstance(data, list):
            return [self.denormalize(item, target, context) for item in data]
        collection = self._metadata or MetadataCollection()
        return self._object_normalizer.denormalize(data, collection.instantiate(target), context)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def serialize(self, value: Any, format: str | None = None, context: Context | None = None) -> str:
        return self._encoder(format).encode(self.normalize(value, context))

    def deserialize(
        self,
        payload: str,
        target: type[T] | T,
        format: str | None = None,
        context: Context | None = None,
    ) -> Any:
        return self.denormalize(self._encoder(format).decode(payload), target, context)

    def encode(self, data: Any, format: str | None = None) -> str:
        """Encode already-normalized data."""
        return self._encoder(format).encode(data)

    def decode(self, payload: str, format: str | None = None) -> Any:
        return self._encoder(format).decode(payload)

    def _encoder(self, format: str | None) -> EncoderInterface:
        name = (format or self._properties.default_format).lower()
        encoder = self._encoders.get(name)
        if encoder is None:
            raise UnsupportedFormatException(name, list(self._encoders))
        return encoder
