"""Shared fixtures for git-new-branch tests."""

import subprocess
from pathlib import Path

import pytest

from git_new_branch.constants import PREFIX_ENV_VAR
from git_new_branch.exceptions import CreationError


def git(repo: Path, *args: str) -> str:
    """Run git in ``repo`` and return stripped stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


@pytest.fixture(autouse=True)
def clean_prefix_env(monkeypatch) -> None:
    """Keep a developer's own GNB_PREFIX out of the tests."""
    monkeypatch.delenv(PREFIX_ENV_VAR, raising=False)


@pytest.fixture
def temp_git_repo(tmp_path: Path, monkeypatch) -> Path:
    """Create a repository with one commit on ``main`` and chdir into it."""
    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init")
    git(repo, "config", "user.email", "test@example.com")
    git(repo, "config", "user.name", "Test")
    git(repo, "config", "commit.gpgsign", "false")
    (repo / "README.md").write_text("test")
    git(repo, "add", ".")
    git(repo, "commit", "-m", "init")
    git(repo, "branch", "-M", "main")

    monkeypatch.chdir(repo)
    return repo


@pytest.fixture
def repo_with_remote(temp_git_repo: Path, tmp_path: Path) -> Path:
    """Attach a local bare ``origin`` and fetch its branches."""
    origin = tmp_path / "origin.git"
    subprocess.run(
        ["git", "init", "--bare", str(origin)], check=True, capture_output=True
    )
    git(temp_git_repo, "remote", "add", "origin", str(origin))
    git(temp_git_repo, "push", "origin", "main")
    git(temp_git_repo, "push", "origin", "HEAD:refs/heads/alice/abc-123")
    git(temp_git_repo, "fetch", "origin")
    return temp_git_repo


class FakeBackend:
    """In-memory BranchBackend."""

    def __init__(self, local=(), remote=(), error: Exception | None = None) -> None:
        self.local = set(local)
        self.remote = set(remote)
        self.error = error
        self.created: list[str] = []
        self.list_calls = 0

    def list_local_branches(self) -> set[str]:
        self.list_calls += 1
        return set(self.local)

    def list_remote_branches(self) -> set[str]:
        return set(self.remote)

    def create_and_switch(self, name: str) -> None:
        if self.error is not None:
            raise self.error
        if name in self.local:
            raise CreationError(f"a branch named '{name}' already exists")
        self.local.add(name)
        self.created.append(name)


@pytest.fixture
def make_backend():
    """Factory for in-memory backends."""
    return FakeBackend
