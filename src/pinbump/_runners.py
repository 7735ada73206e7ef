"""Contains the clack runner functions."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from clack import ConfigFile
from eris import Err
from logrus import Logger

from ._config import InfoConfig, UpdateConfig
from ._files import get_current_version
from ._shell import run_cmd
from ._tags import get_missing_tags
from ._target import Target
from ._update import update_to_missing_tags


logger = Logger(__name__)


def run_update(cfg: UpdateConfig) -> int:
    """Clack runner for the 'update' subcommand."""
    target = Target.from_config(cfg)
    logger.info(
        "Checking the registry for new versions.",
        package_name=target.package_name,
        repo_dir=target.repo_dir,
        dry_run=cfg.dry_run,
    )
    return update_to_missing_tags(target, shell=run_cmd, dry_run=cfg.dry_run)


def run_info(cfg: InfoConfig) -> int:
    """Clack runner for the 'info' subcommand."""
    target = Target.from_config(cfg)
    data: Dict[str, Any] = {}

    current_version_r = get_current_version(target)
    if isinstance(current_version_r, Err):
        logger.warning(
            "Unable to determine the current version.",
            error=current_version_r.err().to_json(),
        )
        data["current_version"] = None
    else:
        data["current_version"] = current_version_r.ok()

    missing_tags_r = get_missing_tags(target, shell=run_cmd)
    if isinstance(missing_tags_r, Err):
        logger.error(
            "An error occurred while attempting to determine which versions"
            " are missing.",
            error=missing_tags_r.err().to_json(),
        )
        return 1

    data["missing_tags"] = missing_tags_r.ok()
    data["config"] = {
        k: str(v) if isinstance(v, (ConfigFile, Path)) else v
        for (k, v) in cfg.dict().items()
    }

    print(json.dumps(data, sort_keys=True))
    return 0
