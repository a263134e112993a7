"""Version-control backend used by the branch namer."""

from pathlib import Path
from typing import Protocol

from .git_utils import list_local_branches, list_remote_branches, switch_to_new_branch


class BranchBackend(Protocol):
    """The operations branch naming needs from version control."""

    def list_local_branches(self) -> set[str]: ...

    def list_remote_branches(self) -> set[str]: ...

    def create_and_switch(self, name: str) -> None: ...


class GitBackend:
    """BranchBackend implemented with the git command line."""

    def __init__(self, repo: Path | None = None) -> None:
        self.repo = repo

    def list_local_branches(self) -> set[str]:
        return list_local_branches(self.repo)

    def list_remote_branches(self) -> set[str]:
        return list_remote_branches(self.repo)

    def create_and_switch(self, name: str) -> None:
        switch_to_new_branch(name, self.repo)
