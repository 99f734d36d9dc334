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
"""objview CLI — inspect metadata files and re-encode records."""

from __future__ import annotations

import click

from objview.cli.console import print_banner
from objview.core.config import Config
from objview.logging import StructlogAdapter


class ObjViewCLI(click.Group):
    """Click group that shows the banner on help."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        print_banner()
        super().format_help(ctx, formatter)


@click.group(cls=ObjViewCLI)
@click.version_option(package_name="objview")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """objview — object normalization toolkit."""
    if verbose:
        StructlogAdapter().configure(Config({"objview": {"logging": {"level": {"root": "DEBUG"}}}}))


from objview.cli.convert import convert_command  # noqa: E402
from objview.cli.info import info_command  # noqa: E402
from objview.cli.metadata import metadata_command  # noqa: E402

cli.add_command(info_command, name="info")
cli.add_command(metadata_command, name="metadata")
cli.add_command(convert_command, name="convert")
