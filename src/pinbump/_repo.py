"""Commits and tags the files changed for a new version."""

from __future__ import annotations

from typing import Any

from eris import ErisError, Err, Ok, Result
from logrus import Logger

from ._constants import COMMIT_MESSAGE
from ._shell import Shell, git, run_cmd
from ._target import Target


logger = Logger(__name__)


def stage_commit_and_tag(
    target: Target, tag: str, *, shell: Shell = run_cmd
) -> Result[None, ErisError]:
    """Commits the manifest and readme files and then creates `tag`."""
    message = COMMIT_MESSAGE(package_name=target.package_name, tag=tag)
    git_cmds = [
        ["add", str(target.manifest), str(target.readme)],
        ["commit", "-m", message],
        ["tag", tag],
    ]
    for args in git_cmds:
        out_r = git(target, *args, shell=shell)
        if isinstance(out_r, Err):
            err: Err[Any, ErisError] = Err(
                f"The 'git {args[0]}' command failed for the {tag} tag."
            )
            return err.chain(out_r)

    logger.info("Committed and tagged new version.", tag=tag)
    return Ok(None)
