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
"""Tests for Config — file loading, env overrides, placeholders, binding."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from objview.core.config import Config, config_properties
from objview.core.properties import SerializerProperties


class TestConfigAccess:
    def test_dot_notation(self) -> None:
        config = Config({"objview": {"serializer": {"indent": 2}}})

        assert config.get("objview.serializer.indent") == 2

    def test_default_for_missing_key(self) -> None:
        assert Config({}).get("missing.key", "fallback") == "fallback"

    def test_false_values_are_returned(self) -> None:
        config = Config({"objview": {"serializer": {"builtin_normalizers": False}}})

        assert config.get("objview.serializer.builtin_normalizers", True) is False

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OBJVIEW_SERIALIZER_DEFAULT_FORMAT", "yaml")
        config = Config({"objview": {"serializer": {"default_format": "json"}}})

        assert config.get("objview.serializer.default_format") == "yaml"

    def test_get_section(self) -> None:
        config = Config({"objview": {"metadata": {"User": {"views": {}}}}})

        assert config.get_section("objview.metadata") == {"User": {"views": {}}}
        assert config.get_section("objview.missing") == {}


class TestPlaceholders:
    def test_config_reference(self) -> None:
        config = Config({"base": {"format": "yaml"}, "objview": {"serializer": {"default_format": "${base.format}"}}})

        assert config.get("objview.serializer.default_format") == "yaml"

    def test_env_reference(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VIEW_FORMAT", "json")
        config = Config({"format": "${VIEW_FORMAT}"})

        assert config.get("format") == "json"

    def test_default_value(self) -> None:
        config = Config({"format": "${UNSET_OBJVIEW_FORMAT:yaml}"})

        assert config.get("format") == "yaml"

    def test_unresolvable_placeholder_raises(self) -> None:
        config = Config({"format": "${UNSET_OBJVIEW_FORMAT}"})

        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("format")

    def test_circular_reference_raises(self) -> None:
        config = Config({"a": "${b}", "b": "${a}"})

        with pytest.raises(ValueError, match="recursion depth"):
            config.get("a")


class TestFileLoading:
    def test_yaml_file_merged_over_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "objview.yaml"
        config_file.write_text("objview:\n  serializer:\n    indent: 4\n")

        config = Config.from_file(config_file)

        assert config.get("objview.serializer.indent") == 4
        assert config.get("objview.serializer.default_format") == "json"
        assert config.loaded_sources[0].startswith("objview-defaults.yaml")

    def test_toml_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "objview.toml"
        config_file.write_text('[objview.serializer]\ndefault_format = "yaml"\n')

        config = Config.from_file(config_file, load_defaults=False)

        assert config.get("objview.serializer.default_format") == "yaml"
        assert config.loaded_sources == [str(config_file)]

    def test_profile_overlay(self, tmp_path: Path) -> None:
        (tmp_path / "objview.yaml").write_text("objview:\n  serializer:\n    indent: 4\n")
        (tmp_path / "objview-dev.yaml").write_text("objview:\n  serializer:\n    indent: 2\n")

        config = Config.from_file(tmp_path / "objview.yaml", active_profiles=["dev"], load_defaults=False)

        assert config.get("objview.serializer.indent") == 2
        assert len(config.loaded_sources) == 2

    def test_missing_file_keeps_defaults(self, tmp_path: Path) -> None:
        config = Config.from_file(tmp_path / "absent.yaml")

        assert config.get("objview.logging.format") == "console"


class TestBinding:
    def test_bind_serializer_properties(self) -> None:
        config = Config({"objview": {"serializer": {"default_format": "yaml", "indent": 2}}})

        properties = config.bind(SerializerProperties)

        assert properties == SerializerProperties(default_format="yaml", indent=2, builtin_normalizers=True)

    def test_bind_converts_env_strings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OBJVIEW_SERIALIZER_INDENT", "3")
        monkeypatch.setenv("OBJVIEW_SERIALIZER_BUILTIN_NORMALIZERS", "false")

        properties = Config({}).bind(SerializerProperties)

        assert properties.indent == 3
        assert properties.builtin_normalizers is False

    def test_bind_custom_dataclass(self) -> None:
        @config_properties(prefix="app.limits")
        @dataclass
        class Limits:
            depth: int = 5
            ratio: float = 0.5

        config = Config({"app": {"limits": {"depth": "9", "ratio": "0.25"}}})

        assert config.bind(Limits) == Limits(depth=9, ratio=0.25)

    def test_bind_requires_decorator(self) -> None:
        @dataclass
        class Plain:
            value: int = 0

        with pytest.raises(ValueError, match="config_properties"):
            Config({}).bind(Plain)
