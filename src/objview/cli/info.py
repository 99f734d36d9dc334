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
"""'objview info' — version and environment information."""

from __future__ import annotations

import platform
import sys

import click
from rich.table import Table

from objview import __version__
from objview.cli.console import console
from objview.serializer import Serializer


@click.command()
def info_command() -> None:
    """Display objview and environment information."""
    table = Table(title=f"objview v{__version__}", show_header=False, border_style="dim")
    table.add_column("Key", style="info")
    table.add_column("Value")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", platform.platform())
    table.add_row("Formats", ", ".join(Serializer().formats))
    console.print(table)
