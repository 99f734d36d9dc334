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
"""Tests for PropertyAccessor — discovery order and visibility."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import pytest

from objview.kernel.exceptions import PrivatePropertyException
from objview.serializer.accessor import PropertyAccessor, PropertyDescriptor


@dataclass
class Point:
    x: int
    y: int
    _label: str = ""

    def is_label(self) -> str:
        return self._label.upper()


class Base:
    id: int
    registry: ClassVar[dict] = {}


class Child(Base):
    name: str

    def __init__(self) -> None:
        self.id = 1
        self.name = "child"
        self.extra = True

    @property
    def title(self) -> str:
        return self.name.title()

    def _internal(self) -> None:
        pass


class Slotted:
    __slots__ = ("a", "b")

    def __init__(self) -> None:
        self.a = 1
        self.b = 2


class Contact:
    def __init__(self, email: str, *aliases: str, verified: bool = False, **extra: str) -> None:
        self.email = email
        self.verified = verified


class TestDiscovery:
    def test_dataclass_fields_in_order(self) -> None:
        accessor = PropertyAccessor(Point(1, 2))

        assert [p.name for p in accessor.get_properties()] == ["x", "y", "_label"]

    def test_annotations_base_first_then_instance_attributes(self) -> None:
        accessor = PropertyAccessor(Child())

        assert [p.name for p in accessor.get_properties()] == ["id", "name", "extra"]

    def test_class_vars_are_excluded(self) -> None:
        names = [p.name for p in PropertyAccessor(Child()).get_properties()]

        assert "registry" not in names

    def test_slots_are_discovered(self) -> None:
        assert [p.name for p in PropertyAccessor(Slotted()).get_properties()] == ["a", "b"]

    def test_bare_instance_falls_back_to_constructor_parameters(self) -> None:
        bare = Contact.__new__(Contact)

        assert [p.name for p in PropertyAccessor(bare).get_properties()] == ["email", "verified"]

    def test_initialized_instance_uses_its_attributes(self) -> None:
        contact = Contact("ada@example.com")

        assert [p.name for p in PropertyAccessor(contact).get_properties()] == ["email", "verified"]

    def test_descriptor(self) -> None:
        descriptor = PropertyDescriptor("_secret")

        assert descriptor.get_name() == "_secret"
        assert descriptor.is_private


class TestAccess:
    def test_get_public_property(self) -> None:
        point = Point(1, 2)

        assert PropertyAccessor(point).get("y", point) == 2

    def test_get_private_property_through_getter(self) -> None:
        point = Point(1, 2, "origin")

        assert PropertyAccessor(point).get("_label", point) == "ORIGIN"

    def test_get_private_property_without_getter_raises(self) -> None:
        child = Child()
        child._hidden = 1  # type: ignore[attr-defined]

        with pytest.raises(PrivatePropertyException) as exc_info:
            PropertyAccessor(child).get("_hidden", child)

        assert exc_info.value.context == {"property": "_hidden", "class": "Child"}

    def test_set_public_property(self) -> None:
        point = Point(1, 2)

        PropertyAccessor(point).set("x", point, 10)

        assert point.x == 10

    def test_set_private_property_without_setter_raises(self) -> None:
        point = Point(1, 2)

        with pytest.raises(PrivatePropertyException):
            PropertyAccessor(point).set("_label", point, "new")


class TestMethods:
    def test_has_method(self) -> None:
        accessor = PropertyAccessor(Child())

        assert accessor.has_method("title")
        assert accessor.has_method("_internal")
        assert not accessor.has_method("name")
        assert not accessor.has_method("missing")

    def test_is_public(self) -> None:
        accessor = PropertyAccessor(Child())

        assert accessor.is_public("title")
        assert not accessor.is_public("_internal")

    def test_invoke_reads_properties_and_calls_methods(self) -> None:
        child = Child()
        point = Point(1, 2, "a")

        assert PropertyAccessor(child).invoke("title", child) == "Child"
        assert PropertyAccessor(point).invoke("is_label", point) == "A"

    def test_class_name(self) -> None:
        assert PropertyAccessor(Child()).class_name() == "Child"
