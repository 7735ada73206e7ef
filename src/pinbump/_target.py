"""Contains the Target class definition."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Type, TypeVar

from pydantic.dataclasses import dataclass

from ._constants import DEFAULT_TAG_PREFIX, NIGHTLY_MARKER, DependencySection


if TYPE_CHECKING:
    from ._config import Config


Target_T = TypeVar("Target_T", bound="Target")


@dataclass(frozen=True)
class Target:
    """Everything pinbump needs to know about the repository it updates.

    Each component receives a Target explicitly instead of reading global
    state, so tests can point one at a temporary directory.
    """

    repo_dir: Path
    package_name: str
    tag_prefix: str = DEFAULT_TAG_PREFIX
    nightly_marker: str = NIGHTLY_MARKER
    readme: Path = Path("README.md")
    manifest: Path = Path("package.json")
    dependency_section: DependencySection = "dependencies"

    @classmethod
    def from_config(cls: Type["Target_T"], cfg: Config) -> "Target_T":
        """Builds a Target from pinbump's command-line configuration."""
        return cls(
            repo_dir=cfg.repo_dir.resolve(),
            package_name=cfg.package_name,
            tag_prefix=cfg.tag_prefix,
            nightly_marker=cfg.nightly_marker,
            readme=cfg.readme,
            manifest=cfg.manifest,
            dependency_section=cfg.dependency_section,
        )

    @property
    def readme_path(self) -> Path:
        return self.repo_dir / self.readme

    @property
    def manifest_path(self) -> Path:
        return self.repo_dir / self.manifest

    def to_tag(self, version: str) -> str:
        """Converts a version (e.g. 1.2.3) into a tag (e.g. v1.2.3)."""
        return f"{self.tag_prefix}{version}"

    def to_version(self, tag: str) -> str:
        """Inverse of `to_tag()`."""
        if tag.startswith(self.tag_prefix):
            return tag[len(self.tag_prefix) :]
        return tag
