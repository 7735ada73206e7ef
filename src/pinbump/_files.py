"""Rewrites the readme and manifest files to reference a new version."""

from __future__ import annotations

import json
from typing import Any, Dict

from eris import ErisError, Err, Ok, Result
from logrus import Logger

from ._target import Target


logger = Logger(__name__)


def read_manifest(target: Target) -> Result[Dict[str, Any], ErisError]:
    """Loads the target's manifest (e.g. package.json) file."""
    try:
        manifest = json.loads(target.manifest_path.read_text(encoding="utf8"))
    except (OSError, ValueError) as e:
        return Err(
            f"Unable to load the {target.manifest_path} manifest file: {e}"
        )

    if not isinstance(manifest, dict):
        return Err(
            f"The {target.manifest_path} manifest file does not contain a"
            " JSON object."
        )

    return Ok(manifest)


def get_current_version(target: Target) -> Result[str, ErisError]:
    """Returns the version of the tracked package pinned by the manifest."""
    manifest_r = read_manifest(target)
    if isinstance(manifest_r, Err):
        return manifest_r

    section = manifest_r.ok().get(target.dependency_section)
    if not isinstance(section, dict) or target.package_name not in section:
        return Err(
            f"The {target.manifest_path} manifest file does not pin"
            f" {target.package_name!r} in its {target.dependency_section!r}"
            " section."
        )

    current_version = section[target.package_name]
    if not isinstance(current_version, str):
        return Err(
            f"The {target.package_name!r} entry of the {target.manifest_path}"
            f" manifest file is not a version string: {current_version!r}"
        )

    return Ok(current_version)


def replace_in_readme(target: Target, version: str) -> Result[str, ErisError]:
    """Replaces the first occurrence of the current version in the readme.

    Returns:
        Ok(readme_contents) containing the new readme contents.
            OR
        Err(ErisError), otherwise.
    """
    current_version_r = get_current_version(target)
    if isinstance(current_version_r, Err):
        return current_version_r

    current_version = current_version_r.ok()
    try:
        # Bytes in, bytes out so that CRLF line endings survive.
        readme = target.readme_path.read_bytes().decode("utf8")
    except (OSError, ValueError) as e:
        return Err(f"Unable to read the {target.readme_path} file: {e}")

    if current_version not in readme:
        logger.warning(
            "The current version was not found in the readme.",
            readme=target.readme_path,
            current_version=current_version,
        )

    new_readme = readme.replace(current_version, version, 1)
    try:
        target.readme_path.write_bytes(new_readme.encode("utf8"))
    except OSError as e:
        return Err(f"Unable to write the {target.readme_path} file: {e}")

    return Ok(new_readme)


def replace_in_manifest(
    target: Target, version: str
) -> Result[Dict[str, Any], ErisError]:
    """Pins the tracked package to `version` in the manifest."""
    manifest_r = read_manifest(target)
    if isinstance(manifest_r, Err):
        return manifest_r

    manifest = manifest_r.ok()
    section = manifest.get(target.dependency_section)
    if not isinstance(section, dict):
        return Err(
            f"The {target.manifest_path} manifest file has no"
            f" {target.dependency_section!r} section."
        )

    section[target.package_name] = version

    contents = json.dumps(manifest, indent=2, ensure_ascii=False)
    try:
        if target.manifest_path.read_text(encoding="utf8").endswith("\n"):
            contents += "\n"
        target.manifest_path.write_text(contents, encoding="utf8")
    except OSError as e:
        return Err(f"Unable to write the {target.manifest_path} file: {e}")

    return Ok(manifest)


def update_files(target: Target, tag: str) -> Result[None, ErisError]:
    """Points the readme and manifest at the version named by `tag`."""
    version = target.to_version(tag)

    # The readme MUST be updated first since it reads the old version from
    # the manifest.
    readme_r = replace_in_readme(target, version)
    if isinstance(readme_r, Err):
        err: Err[Any, ErisError] = Err(
            f"Failed to update the readme for the {tag} tag."
        )
        return err.chain(readme_r)

    manifest_r = replace_in_manifest(target, version)
    if isinstance(manifest_r, Err):
        err = Err(f"Failed to update the manifest for the {tag} tag.")
        return err.chain(manifest_r)

    logger.info("Updated project files.", tag=tag, version=version)
    return Ok(None)
