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
"""Tests for CLI commands."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from objview.cli.main import cli

METADATA_YAML = """\
objview:
  metadata:
    User:
      attributes:
        id: {type: int, views: [public]}
        name: {getter: display_name, views: [public]}
      views:
        admin: [id, name, ssn]
"""


class TestCLI:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "objview" in result.output
        assert "Apache 2.0 License" in result.output

    def test_info(self):
        result = CliRunner().invoke(cli, ["info"])
        assert result.exit_code == 0
        assert "json, yaml" in result.output


class TestMetadataCommand:
    def test_lists_classes(self, tmp_path: Path):
        path = tmp_path / "objview.yaml"
        path.write_text(METADATA_YAML)

        result = CliRunner().invoke(cli, ["metadata", str(path)])

        assert result.exit_code == 0, result.output
        assert "User" in result.output
        assert "display_name" in result.output
        assert "1 class(es) valid" in result.output

    def test_invalid_metadata_fails(self, tmp_path: Path):
        path = tmp_path / "objview.yaml"
        path.write_text("objview:\n  metadata:\n    User:\n      attributes:\n        id: {setter: x}\n")

        result = CliRunner().invoke(cli, ["metadata", str(path)])

        assert result.exit_code == 1
        assert "Invalid metadata" in result.output

    def test_malformed_yaml_fails(self, tmp_path: Path):
        path = tmp_path / "objview.yaml"
        path.write_text("objview:\n  metadata: [unclosed\n")

        result = CliRunner().invoke(cli, ["metadata", str(path)])

        assert result.exit_code == 1
        assert "Invalid metadata" in result.output

    def test_malformed_toml_fails(self, tmp_path: Path):
        path = tmp_path / "objview.toml"
        path.write_text("[objview.metadata\n")

        result = CliRunner().invoke(cli, ["metadata", str(path)])

        assert result.exit_code == 1
        assert "Invalid metadata" in result.output

    def test_empty_metadata_warns(self, tmp_path: Path):
        path = tmp_path / "objview.yaml"
        path.write_text("objview: {}\n")

        result = CliRunner().invoke(cli, ["metadata", str(path)])

        assert result.exit_code == 0
        assert "No metadata found" in result.output


class TestConvertCommand:
    def test_json_to_yaml(self, tmp_path: Path):
        path = tmp_path / "user.json"
        path.write_text('{"id": 1, "name": "Ada"}')

        result = CliRunner().invoke(cli, ["convert", str(path)])

        assert result.exit_code == 0, result.output
        assert result.output == "id: 1\nname: Ada\n"

    def test_yaml_to_json_with_indent(self, tmp_path: Path):
        path = tmp_path / "user.yaml"
        path.write_text("id: 1\n")

        result = CliRunner().invoke(cli, ["convert", str(path), "--from", "yaml", "--to", "json", "--indent", "2"])

        assert result.exit_code == 0, result.output
        assert result.output == '{\n  "id": 1\n}\n'

    def test_unsupported_format(self, tmp_path: Path):
        path = tmp_path / "user.json"
        path.write_text("{}")

        result = CliRunner().invoke(cli, ["convert", str(path), "--to", "xml"])

        assert result.exit_code == 2
        assert "Unsupported format" in result.output


class TestGlobalOptions:
    def test_verbose_flag(self, tmp_path: Path):
        path = tmp_path / "objview.yaml"
        path.write_text(METADATA_YAML)

        result = CliRunner().invoke(cli, ["--verbose", "metadata", str(path)])

        assert result.exit_code == 0, result.output
        assert "1 class(es) valid" in result.output
