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
"""'objview metadata' — validate and display a metadata configuration file."""

from __future__ import annotations

import tomllib
from pathlib import Path

import click
import yaml
from rich.markup import escape
from rich.table import Table

from objview.cli.console import console
from objview.core.config import Config
from objview.kernel.exceptions import MetadataException
from objview.serializer.metadata import ClassMetadata, MetadataCollection


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--profile", "profiles", multiple=True, help="Active profile overlay (repeatable).")
def metadata_command(path: Path, profiles: tuple[str, ...]) -> None:
    """Validate the objview.metadata section of PATH and list its classes."""
    try:
        config = Config.from_file(path, active_profiles=list(profiles), load_defaults=False)
        collection = MetadataCollection.from_mapping(config.get_section("objview.metadata"))
    except (MetadataException, yaml.YAMLError, tomllib.TOMLDecodeError) as exc:
        console.print(f"[error]Invalid metadata:[/error] {escape(str(exc))}")
        raise SystemExit(1) from exc

    if not len(collection):
        console.print("[warning]No metadata found under objview.metadata[/warning]")
        return

    for name, metadata in collection:
        console.print(_class_table(name, metadata))
    console.print(f"[success]{len(collection)} class(es) valid[/success]")


def _class_table(name: str, metadata: ClassMetadata) -> Table:
    table = Table(title=f"[objview]{name}[/objview]", border_style="dim")
    table.add_column("Property", style="info")
    table.add_column("Getter")
    table.add_column("Class")
    table.add_column("Type")
    table.add_column("Views", style="dim")

    for prop, conf in metadata.attributes.items():
        table.add_row(
            prop,
            conf.getter or "",
            str(conf.cls or ""),
            conf.type or "",
            ", ".join(conf.views),
        )
    for view in metadata.views:
        table.add_row(f"[dim]view[/dim] {view}", "", "", "", str(metadata.get_view_or_none(view)))
    return table
