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
"""objview Serializer — metadata-driven object normalization."""

from objview.serializer.accessor import PropertyAccessor, PropertyDescriptor
from objview.serializer.builtin import DateTimeNormalizer, EnumNormalizer, StringNormalizer
from objview.serializer.context import Context, Navigator
from objview.serializer.encoders import EncoderInterface, JsonEncoder, YamlEncoder
from objview.serializer.metadata import ClassMetadata, MetadataCollection, PropertyConfiguration
from objview.serializer.normalizer import NormalizerInterface, NormalizerRegistry, ObjectNormalizer
from objview.serializer.serializer import Serializer

__all__ = [
    "ClassMetadata",
    "Context",
    "DateTimeNormalizer",
    "EncoderInterface",
    "EnumNormalizer",
    "JsonEncoder",
    "MetadataCollection",
    "Navigator",
    "NormalizerInterface",
    "NormalizerRegistry",
    "ObjectNormalizer",
    "PropertyAccessor",
    "PropertyConfiguration",
    "PropertyDescriptor",
    "Serializer",
    "StringNormalizer",
    "YamlEncoder",
]
