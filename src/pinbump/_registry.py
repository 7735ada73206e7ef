"""Queries the package registry for published versions."""

from __future__ import annotations

import json
from typing import Any, List

from eris import ErisError, Err, Ok, Result
from logrus import Logger

from ._shell import Shell, run_cmd
from ._target import Target


logger = Logger(__name__)


def get_package_versions(
    target: Target, *, shell: Shell = run_cmd
) -> Result[List[str], ErisError]:
    """Returns every version of the target's package, in registry order."""
    out_r = shell(["npm", "view", target.package_name, "--json"])
    if isinstance(out_r, Err):
        err: Err[Any, ErisError] = Err(
            "Unable to query the registry for the"
            f" {target.package_name!r} package."
        )
        return err.chain(out_r)

    out = out_r.ok()
    try:
        data = json.loads(out)
    except json.JSONDecodeError as e:
        return Err(
            f"The registry returned invalid JSON for {target.package_name!r}:"
            f" {e}"
        )

    versions = data.get("versions") if isinstance(data, dict) else None
    if versions is None:
        return Err(
            f"The registry listing for {target.package_name!r} has no"
            " 'versions' field."
        )

    # npm reports a lone version as a plain string.
    if isinstance(versions, str):
        versions = [versions]

    logger.debug(
        "Found %d published versions.",
        len(versions),
        package_name=target.package_name,
    )
    return Ok(list(versions))


def filter_versions(versions: List[str], nightly_marker: str) -> List[str]:
    """Drops nightly (i.e. pre-release) versions."""
    return [v for v in versions if nightly_marker not in v]


def get_all_tags(
    target: Target, *, shell: Shell = run_cmd
) -> Result[List[str], ErisError]:
    """Returns a sorted tag for every non-nightly published version."""
    versions_r = get_package_versions(target, shell=shell)
    if isinstance(versions_r, Err):
        return versions_r

    versions = filter_versions(versions_r.ok(), target.nightly_marker)
    return Ok(sorted(target.to_tag(v) for v in versions))
