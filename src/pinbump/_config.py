"""Command-line tool that tags a repository for every new release of the
package it wraps.

Examples:
    # Commit and tag every version of @biomejs/biome that has been published
    # on npm but does not have a matching git tag yet.
    pinbump update

    # Only print the tags that WOULD be created.
    pinbump update --dry-run

    # Track a different package from another repository checkout.
    pinbump --repo-dir ../biome-wrapper --package-name @biomejs/biome update

    # Print internal pinbump information to STDOUT as JSON data.
    pinbump info
"""

# NOTE: The above docstring is used by clack for the command-line --help
#   message. This module is used to define clack configuration classes and the
#   clack parser function.
from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Sequence

import clack
from typist import literal_to_list

from ._constants import (
    DEFAULT_PACKAGE_NAME,
    DEFAULT_TAG_PREFIX,
    NIGHTLY_MARKER,
    DependencySection,
)


InfoCommand = Literal["info"]
UpdateCommand = Literal["update"]
Command = Literal[InfoCommand, UpdateCommand]  # available CLI sub-commands


class Config(clack.Config):
    """Base configuration class."""

    command: Command

    # --- OPTIONS
    package_name: str = DEFAULT_PACKAGE_NAME
    repo_dir: Path = Path(".")
    tag_prefix: str = DEFAULT_TAG_PREFIX

    # --- CONFIG
    dependency_section: DependencySection = "dependencies"
    manifest: Path = Path("package.json")
    nightly_marker: str = NIGHTLY_MARKER
    readme: Path = Path("README.md")


class InfoConfig(Config):
    """Config for the 'info' subcommand."""

    command: InfoCommand


class UpdateConfig(Config):
    """Config for the 'update' subcommand."""

    command: UpdateCommand

    # --- OPTIONS
    dry_run: bool = False


def clack_parser(argv: Sequence[str]) -> dict[str, Any]:
    """Parses pinbump's command-line arguments."""
    parser = clack.Parser()
    parser.add_argument(
        "--repo-dir",
        type=Path,
        help=(
            "Root of the git repository whose tags, readme, and manifest we"
            " keep in sync with the registry. Defaults to the current"
            " directory."
        ),
    )
    parser.add_argument(
        "--package-name",
        help=(
            "Name of the registry package to track. Defaults to"
            f" {DEFAULT_PACKAGE_NAME!r}."
        ),
    )
    parser.add_argument(
        "--tag-prefix",
        help=(
            "Prefix that turns a version into a git tag name. Defaults to"
            f" {DEFAULT_TAG_PREFIX!r}."
        ),
    )
    parser.add_argument(
        "--dependency-section",
        choices=literal_to_list(DependencySection),
        help=(
            "The manifest section which pins the tracked package. Defaults to"
            " 'dependencies'."
        ),
    )

    new_command = clack.new_command_factory(parser)

    ### setup the 'info' subcommand...
    new_command(
        "info", help="Print internal state to standard output as JSON."
    )

    ### setup the 'update' subcommand...
    update_parser = new_command(
        "update",
        help=(
            "Update the readme and manifest, commit, and tag once for every"
            " published version that has no matching git tag."
        ),
    )
    update_parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help=(
            "Report which tags would be created without touching any files"
            " or running any git commands that change the repository."
        ),
    )

    args = parser.parse_args(argv[1:])
    kwargs = clack.filter_cli_args(args)

    return kwargs
