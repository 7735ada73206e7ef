"""Contains constant variables."""

from __future__ import annotations

from typing import Final, Literal


DependencySection = Literal[
    "dependencies",
    "devDependencies",
    "optionalDependencies",
    "peerDependencies",
]

PROJECT_NAME: Final = "pinbump"

DEFAULT_PACKAGE_NAME: Final = "@biomejs/biome"
DEFAULT_TAG_PREFIX: Final = "v"
NIGHTLY_MARKER: Final = "nightly"

COMMIT_MESSAGE: Final = "MAINT: upgrade to {package_name} {tag}".format
