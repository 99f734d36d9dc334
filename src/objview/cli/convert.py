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
"""'objview convert' — re-encode a record file between wire formats."""

from __future__ import annotations

from pathlib import Path

import click

from objview.cli.console import console
from objview.core.properties import SerializerProperties
from objview.kernel.exceptions import UnsupportedFormatException
from objview.serializer import Serializer


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--from", "source_format", default="json", show_default=True, help="Format of PATH.")
@click.option("--to", "target_format", default="yaml", show_default=True, help="Output format.")
@click.option("--indent", type=int, default=None, help="JSON indentation.")
def convert_command(path: Path, source_format: str, target_format: str, indent: int | None) -> None:
    """Decode PATH and print it encoded in another format."""
    serializer = Serializer(properties=SerializerProperties(indent=indent))
    try:
        data = serializer.decode(path.read_text(), source_format)
        output = serializer.encode(data, target_format)
    except UnsupportedFormatException as exc:
        console.print(f"[error]{exc}[/error]")
        raise SystemExit(2) from exc
    click.echo(output, nl=not output.endswith("\n"))
