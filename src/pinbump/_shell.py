"""Runs the external commands (npm and git) that pinbump depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Sequence

from eris import ErisError, Err, Ok, Result
from logrus import Logger
import proctor


if TYPE_CHECKING:
    from ._target import Target


logger = Logger(__name__)


class Shell(Protocol):
    """Runs a command and returns its captured STDOUT."""

    def __call__(self, cmd_list: Sequence[str]) -> Result[str, ErisError]:
        pass


def run_cmd(cmd_list: Sequence[str]) -> Result[str, ErisError]:
    """The default Shell implementation."""
    logger.debug("Running command: %s", " ".join(cmd_list))
    out_err_r = proctor.safe_popen(list(cmd_list))
    if isinstance(out_err_r, Err):
        err: Err[Any, ErisError] = Err(
            f"The following command failed: {' '.join(cmd_list)!r}"
        )
        return err.chain(out_err_r)

    out, _err = out_err_r.ok()
    return Ok(out)


def git(
    target: Target, *args: str, shell: Shell = run_cmd
) -> Result[str, ErisError]:
    """Runs a git command against the target's repository."""
    return shell(["git", "-C", str(target.repo_dir), *args])
