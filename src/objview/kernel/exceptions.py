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
"""Unified exception hierarchy for objview.

All library exceptions inherit from ObjViewException, enabling unified
error handling. Errors raised by user code (custom getters, denormalizer
functions, delegated normalizers) are never wrapped.

Categories:
- SerializerException: property access, getter and metadata failures
- CoercionException: raw values that cannot be converted to a declared type
- UnsupportedFormatException: no encoder registered for a wire format
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Base Exception
# =============================================================================


class ObjViewException(Exception):
    """Base exception for all objview errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "PRIVATE_PROPERTY").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Serializer Exceptions
# =============================================================================


class SerializerException(ObjViewException):
    """Failures while normalizing or denormalizing an object."""


class PrivatePropertyException(SerializerException):
    """A property cannot be read or written because it is not public."""

    def __init__(self, property_name: str, class_name: str) -> None:
        super().__init__(
            f"Property '{property_name}' of class '{class_name}' is not accessible",
            code="PRIVATE_PROPERTY",
            context={"property": property_name, "class": class_name},
        )
        self.property_name = property_name
        self.class_name = class_name


class MethodException(SerializerException):
    """A configured getter is missing or not public."""

    def __init__(self, getter: str, class_name: str, property_name: str) -> None:
        super().__init__(
            f"Getter '{getter}' configured for property '{property_name}' "
            f"does not exist or is not public on class '{class_name}'",
            code="METHOD_NOT_PUBLIC",
            context={"getter": getter, "class": class_name, "property": property_name},
        )
        self.getter = getter
        self.class_name = class_name
        self.property_name = property_name


class MetadataException(SerializerException):
    """Metadata is malformed or references an unknown type or function."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="METADATA_INVALID", context=context)


class CoercionException(SerializerException):
    """A raw value cannot be coerced to the type declared in metadata."""

    def __init__(self, property_name: str, type_tag: str, value: Any) -> None:
        super().__init__(
            f"Cannot coerce {value!r} to '{type_tag}' for property '{property_name}'",
            code="COERCION_FAILED",
            context={"property": property_name, "type": type_tag, "value": value},
        )
        self.property_name = property_name
        self.type_tag = type_tag
        self.value = value


class UnsupportedFormatException(SerializerException):
    """No encoder is registered for the requested format."""

    def __init__(self, format: str, supported: list[str] | None = None) -> None:
        supported = sorted(supported or [])
        super().__init__(
            f"Unsupported format '{format}' (supported: {', '.join(supported) or 'none'})",
            code="UNSUPPORTED_FORMAT",
            context={"format": format, "supported": supported},
        )
        self.format = format
