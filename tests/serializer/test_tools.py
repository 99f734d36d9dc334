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
"""Tests for view lookup helpers and value shape dispatch."""

from __future__ import annotations

import datetime
from decimal import Decimal

import pytest

from objview.serializer.tools import ValueKind, deep_get, is_record, is_record_list, value_kind, view_includes


class TestDeepGet:
    def test_empty_path_returns_data(self) -> None:
        data = ["id"]

        assert deep_get(data, []) is data

    def test_mapping_path(self) -> None:
        assert deep_get({"customer": {"address": ["city"]}}, ["customer", "address"]) == ["city"]

    def test_mixed_list_path(self) -> None:
        view = ["id", {"customer": ["name"]}, {"lines": ["sku"]}]

        assert deep_get(view, ["lines"]) == ["sku"]

    def test_missing_segment_returns_none(self) -> None:
        assert deep_get(["id", "customer"], ["customer"]) is None
        assert deep_get({"a": ["x"]}, ["b"]) is None

    def test_walking_past_a_leaf_returns_none(self) -> None:
        assert deep_get({"a": "leaf"}, ["a", "b"]) is None

    def test_none_data(self) -> None:
        assert deep_get(None, ["a"]) is None


class TestViewIncludes:
    @pytest.mark.parametrize("view", [None, [], {}, True])
    def test_no_filter(self, view: object) -> None:
        assert view_includes(view, "anything")

    def test_list_entries_and_nested_keys(self) -> None:
        view = ["id", {"customer": ["name"]}]

        assert view_includes(view, "id")
        assert view_includes(view, "customer")
        assert not view_includes(view, "ssn")

    def test_mapping_keys(self) -> None:
        assert view_includes({"id": None}, "id")
        assert not view_includes({"id": None}, "name")


class TestValueKind:
    @pytest.mark.parametrize("value", [None, True, 1, 1.5, Decimal("1"), "s", b"b", {"a": 1}, {1, 2}])
    def test_scalars(self, value: object) -> None:
        assert value_kind(value) is ValueKind.SCALAR

    @pytest.mark.parametrize("value", [[], [1], (1, 2)])
    def test_sequences(self, value: object) -> None:
        assert value_kind(value) is ValueKind.SEQUENCE

    def test_objects(self) -> None:
        assert value_kind(datetime.date(2024, 1, 1)) is ValueKind.OBJECT
        assert value_kind(object()) is ValueKind.OBJECT

    def test_record_shapes(self) -> None:
        assert is_record({"a": 1})
        assert not is_record([{"a": 1}])
        assert is_record_list([{"a": 1}, {"b": 2}])
        assert not is_record_list([{"a": 1}, 2])
        assert not is_record_list(({"a": 1},))
