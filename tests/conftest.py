"""This file contains shared fixtures and pytest hooks.

https://docs.pytest.org/en/6.2.x/fixture.html#conftest-py-sharing-fixtures-across-multiple-files
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Type

from eris import ErisError, Err, Ok, Result
from pytest import fixture

from pinbump._target import Target


PACKAGE_NAME = "@biomejs/biome"

README_CONTENTS = """\
# biome-wrapper

Pin @biomejs/biome to version 1.0.0 in your project:

    npm install --save-exact @biomejs/biome@1.0.0

Works with 1.0.0 and newer.
"""

MANIFEST = {
    "name": "biome-wrapper",
    "version": "0.0.0",
    "dependencies": {PACKAGE_NAME: "1.0.0", "left-pad": "1.3.0"},
}


class FakeShell:
    """Stands in for npm and git.

    Records every command it receives. `git tag <name>` commands add to the
    list of known tags so later `git tag --list` calls see them.
    """

    def __init__(
        self,
        versions: Iterable[str] = (),
        tags: Iterable[str] = (),
        *,
        fail_on: Optional[Sequence[str]] = None,
        registry_output: Optional[str] = None,
    ) -> None:
        self.versions = list(versions)
        self.tags = list(tags)
        self.fail_on = fail_on
        self.registry_output = registry_output
        self.calls: List[List[str]] = []

    def __call__(self, cmd_list: Sequence[str]) -> Result[str, ErisError]:
        cmd_list = list(cmd_list)
        self.calls.append(cmd_list)

        if self.fail_on is not None and _contains(cmd_list, self.fail_on):
            return Err(f"Command failed: {cmd_list!r}")

        if cmd_list[0] == "npm":
            if self.registry_output is not None:
                return Ok(self.registry_output)
            listing = {"name": PACKAGE_NAME, "versions": self.versions}
            return Ok(json.dumps(listing))

        git_args = cmd_list[3:]
        if git_args == ["tag", "--list"]:
            return Ok("\n".join(self.tags) + "\n")
        if git_args[0] == "tag":
            self.tags.append(git_args[1])

        return Ok("")

    @property
    def git_calls(self) -> List[List[str]]:
        """The arguments of every git command (minus `git -C DIR`)."""
        return [call[3:] for call in self.calls if call[0] == "git"]


def _contains(cmd_list: Sequence[str], sub: Sequence[str]) -> bool:
    n = len(sub)
    return any(
        list(cmd_list[i : i + n]) == list(sub)
        for i in range(len(cmd_list) - n + 1)
    )


def write_manifest(path: Path, manifest: Dict[str, Any]) -> None:
    """Writes a manifest file the way npm does."""
    path.write_text(json.dumps(manifest, indent=2) + "\n")


@fixture(name="repo_dir")
def repo_dir_fixture(tmp_path: Path) -> Path:
    """A repository root containing a readme and a manifest."""
    result = tmp_path / "repo"
    result.mkdir()
    (result / "README.md").write_text(README_CONTENTS)
    write_manifest(result / "package.json", MANIFEST)
    return result


@fixture(name="target")
def target_fixture(repo_dir: Path) -> Target:
    """A Target which points at the `repo_dir` fixture."""
    return Target(repo_dir=repo_dir, package_name=PACKAGE_NAME)


@fixture(name="make_shell")
def make_shell_fixture() -> Type[FakeShell]:
    """Returns the FakeShell class so tests can build one per scenario."""
    return FakeShell
