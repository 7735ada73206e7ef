"""Applies every missing version to the repository, one tag at a time."""

from __future__ import annotations

from typing import Any

from eris import ErisError, Err, Ok, Result
from logrus import Logger

from ._files import update_files
from ._repo import stage_commit_and_tag
from ._shell import Shell, run_cmd
from ._tags import get_missing_tags
from ._target import Target


logger = Logger(__name__)


def update_to_missing_tags(
    target: Target, *, shell: Shell = run_cmd, dry_run: bool = False
) -> int:
    """Updates, commits, and tags the repository for each missing version.

    Tags are processed in ascending order and each one is fully applied
    before the next is started. The first error aborts the run; tags that
    were already created are left in place.

    Returns:
        0 if every missing tag was applied (or there was nothing to do).
            OR
        1, otherwise.
    """
    missing_tags_r = get_missing_tags(target, shell=shell)
    if isinstance(missing_tags_r, Err):
        e = missing_tags_r.err()
        logger.error(
            "An error occurred while attempting to determine which versions"
            " are missing.",
            package_name=target.package_name,
            error=e.to_json(),
        )
        return 1

    missing_tags = missing_tags_r.ok()
    if not missing_tags:
        print("No new versions found")
        return 0

    for tag in missing_tags:
        if dry_run:
            print(f"Would update to {tag}")
            continue

        print(f"Updating to {tag}")
        tag_r = _apply_tag(target, tag, shell=shell)
        if isinstance(tag_r, Err):
            e = tag_r.err()
            logger.error(
                "An error occurred while attempting to update to %s.",
                tag,
                error=e.to_json(),
            )
            return 1

    return 0


def _apply_tag(
    target: Target, tag: str, *, shell: Shell
) -> Result[None, ErisError]:
    files_r = update_files(target, tag)
    if isinstance(files_r, Err):
        return files_r

    commit_r = stage_commit_and_tag(target, tag, shell=shell)
    if isinstance(commit_r, Err):
        err: Err[Any, ErisError] = Err(
            f"Project files were updated for {tag} but were not committed."
        )
        return err.chain(commit_r)

    return Ok(None)
