# Copyright 2026 The Stretchy Hash Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""The main entry-point for the stretchy_hash package."""

from collections.abc import Sequence
import logging
import pathlib
import sys

import click

import stretchy_hash


# Decorator for the commonly used option to select the base hash algorithm.
_algorithm_option = click.option(
    "-a",
    "--algorithm",
    type=click.Choice(["sha256", "blake2", "blake3"]),
    default="sha256",
    show_default=True,
    help="The base hashing algorithm to stretch.",
)


# Decorator for the commonly used option to set the stretch factor.
_stretch_option = click.option(
    "-s",
    "--stretch",
    type=int,
    default=1,
    show_default=True,
    metavar="STRETCH",
    help="The stretch factor, from 1 to 4.",
)


def _build_config(algorithm: str, stretch: int) -> stretchy_hash.hashing.Config:
    return (
        stretchy_hash.hashing.Config()
        .use_algorithm(algorithm)
        .set_stretch(stretch)
    )


@click.group(
    context_settings=dict(help_option_names=["-h", "--help"]),
    epilog="Stretching does not add any cryptographic strength to a digest.",
)
@click.version_option(stretchy_hash.__version__, "--version")
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default="WARNING",
    show_default=True,
    metavar="LEVEL",
    envvar="STRETCHY_HASH_LOG_LEVEL",
    help="Set the logging level. This can also be set via the "
    "STRETCHY_HASH_LOG_LEVEL env var.",
)
def main(log_level: str) -> None:
    """Stretched digests of files.

    Use each subcommand's `--help` option for details on each mode.
    """
    logging.basicConfig(
        format="%(message)s", level=getattr(logging, log_level.upper())
    )


@main.command(name="digest")
@click.argument("paths", type=str, metavar="PATHS", nargs=-1)
@_algorithm_option
@_stretch_option
@click.option(
    "--chunk_size",
    type=int,
    default=1048576,
    show_default=True,
    metavar="BYTES",
    help="The amount of data to read at once. 0 reads whole files at once.",
)
def _digest(
    paths: Sequence[str], algorithm: str, stretch: int, chunk_size: int
) -> None:
    """Print stretched digests.

    Hashes every file in PATHS and prints the hexadecimal stretched digest,
    followed by the path. With no PATHS, or when a path is `-`, reads the
    standard input.
    """
    try:
        config = _build_config(algorithm, stretch).set_chunk_size(chunk_size)
        for path in paths or ["-"]:
            if path == "-":
                data = click.get_binary_stream("stdin").read()
                digest = config.hash(data)
            else:
                digest = config.hash_file(pathlib.Path(path))
            click.echo(f"{digest.digest_hex}  {path}")
    except Exception as err:
        click.echo(f"Hashing failed with error: {err}", err=True)
        sys.exit(1)


@main.command(name="size")
@_algorithm_option
@_stretch_option
def _size(algorithm: str, stretch: int) -> None:
    """Print the size of stretched digests, in bytes.

    No data is hashed to compute the size.
    """
    try:
        config = _build_config(algorithm, stretch)
    except Exception as err:
        click.echo(f"Computing size failed with error: {err}", err=True)
        sys.exit(1)

    click.echo(config.digest_size)
