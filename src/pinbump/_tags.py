"""Logic for comparing registry versions against local git tags."""

from __future__ import annotations

from typing import Any, Iterable, List

from eris import ErisError, Err, Ok, Result
from logrus import Logger

from ._registry import get_all_tags
from ._shell import Shell, git, run_cmd
from ._target import Target


logger = Logger(__name__)


def get_existing_tags(
    target: Target, *, shell: Shell = run_cmd
) -> Result[List[str], ErisError]:
    """Returns the repository's version tags, sorted."""
    out_r = git(target, "tag", "--list", shell=shell)
    if isinstance(out_r, Err):
        err: Err[Any, ErisError] = Err(
            f"Unable to list the git tags in {target.repo_dir}."
        )
        return err.chain(out_r)

    tags = [
        line.strip()
        for line in out_r.ok().split("\n")
        if line.strip().startswith(target.tag_prefix)
    ]
    return Ok(sorted(tags))


def diff_tags(
    all_tags: Iterable[str], existing_tags: Iterable[str]
) -> List[str]:
    """Returns the tags in `all_tags` which are NOT in `existing_tags`."""
    return sorted(set(all_tags) - set(existing_tags))


def get_missing_tags(
    target: Target, *, shell: Shell = run_cmd
) -> Result[List[str], ErisError]:
    """Returns the published versions (as tags) that we have not tagged yet."""
    all_tags_r = get_all_tags(target, shell=shell)
    if isinstance(all_tags_r, Err):
        return all_tags_r

    existing_tags_r = get_existing_tags(target, shell=shell)
    if isinstance(existing_tags_r, Err):
        return existing_tags_r

    missing_tags = diff_tags(all_tags_r.ok(), existing_tags_r.ok())
    logger.debug("Computed missing tags.", missing_tags=missing_tags)
    return Ok(missing_tags)
