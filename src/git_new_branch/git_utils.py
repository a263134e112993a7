"""Thin wrappers around the git command line."""

import subprocess
from pathlib import Path
from typing import List, Optional, Set

from .exceptions import BranchListError, CreationError, GitError, NotARepositoryError

REMOTES_NAMESPACE = "refs/remotes/"


def run_command(
    cmd: List[str],
    cwd: Optional[Path] = None,
    check: bool = True,
    capture: bool = False,
) -> subprocess.CompletedProcess:
    """
    Run ``cmd`` and return the finished process.

    With ``capture`` the output is collected as text with stderr folded into
    stdout. Bytes that are not valid UTF-8 (git allows them in ref names) are
    kept as surrogate escapes so they survive a round trip back to git.

    Raises:
        GitError: If ``cmd`` cannot be started, or exits non-zero while
            ``check`` is set. The captured text is kept on ``GitError.output``.
    """
    kwargs = {}
    if capture:
        kwargs["stdout"] = subprocess.PIPE
        kwargs["stderr"] = subprocess.STDOUT
        kwargs["encoding"] = "utf-8"
        kwargs["errors"] = "surrogateescape"

    try:
        result = subprocess.run(cmd, cwd=cwd, check=False, **kwargs)
    except FileNotFoundError as e:
        raise GitError(f"Command not found: {cmd[0]}") from e

    if check and result.returncode != 0:
        output = result.stdout if capture else ""
        raise GitError(f"Command failed: {' '.join(cmd)}\n{output}", output=output or "")
    return result


def git_command(
    *args: str,
    repo: Optional[Path] = None,
    check: bool = True,
    capture: bool = False,
) -> subprocess.CompletedProcess:
    """Run ``git <args>`` inside ``repo`` (see run_command)."""
    cmd = ["git"] + list(args)
    return run_command(cmd, cwd=repo, check=check, capture=capture)


def get_repo_root(path: Optional[Path] = None) -> Path:
    """
    Return the top of the work tree containing ``path`` (or the cwd).

    Raises:
        NotARepositoryError: If there is no enclosing work tree; git's own
            message is kept on ``output``.
    """
    try:
        result = git_command("rev-parse", "--show-toplevel", repo=path, capture=True)
    except GitError as e:
        raise NotARepositoryError("Not inside a git repository", output=e.output) from e
    return Path(result.stdout.strip())


def _for_each_ref(fmt: str, namespace: str, repo: Optional[Path]) -> List[str]:
    result = git_command(
        "for-each-ref", f"--format={fmt}", namespace, repo=repo, check=False, capture=True
    )
    if result.returncode != 0:
        output = (result.stdout or "").strip()
        raise BranchListError(f"Failed to list branches in {namespace}: {output}", output=output)
    return [line.strip() for line in result.stdout.splitlines() if line.strip()]


def list_local_branches(repo: Optional[Path] = None) -> Set[str]:
    """
    List local branch names.

    Args:
        repo: Repository path

    Returns:
        Short branch names (``refs/heads/`` stripped)

    Raises:
        BranchListError: If git cannot list the refs
    """
    return set(_for_each_ref("%(refname:short)", "refs/heads", repo))


def list_remote_branches(repo: Optional[Path] = None) -> Set[str]:
    """
    List remote-tracking branch names without their remote segment.

    ``refs/remotes/origin/alice/fix`` is reported as ``alice/fix``. Remote
    names may contain slashes, so the longest configured remote that prefixes
    the ref wins; refs left over from a removed remote lose their first
    segment. Only the refs already present locally are read; nothing is
    fetched. Symbolic ``<remote>/HEAD`` entries are skipped.

    Args:
        repo: Repository path

    Returns:
        Leaf branch names across all remotes

    Raises:
        BranchListError: If git cannot list the remotes or their refs
    """
    result = git_command("remote", repo=repo, check=False, capture=True)
    if result.returncode != 0:
        output = (result.stdout or "").strip()
        raise BranchListError(f"Failed to list remotes: {output}", output=output)
    remotes = sorted(
        (line.strip() for line in result.stdout.splitlines() if line.strip()),
        key=len,
        reverse=True,
    )

    names = set()
    for ref in _for_each_ref("%(refname)", "refs/remotes", repo):
        tail = ref[len(REMOTES_NAMESPACE):]
        for remote in remotes:
            if tail.startswith(remote + "/"):
                name = tail[len(remote) + 1:]
                break
        else:
            name = tail.partition("/")[2]
        if name and name != "HEAD":
            names.add(name)
    return names


def switch_to_new_branch(name: str, repo: Optional[Path] = None) -> None:
    """
    Create ``name`` at HEAD and check it out.

    Uses ``git switch -c`` and falls back to ``git checkout -b`` for git
    versions that predate switch.

    Args:
        name: New branch name
        repo: Repository path

    Raises:
        CreationError: If git rejects the branch
    """
    result = git_command("switch", "-c", name, repo=repo, check=False, capture=True)
    if result.returncode == 0:
        return

    result = git_command("checkout", "-b", name, repo=repo, check=False, capture=True)
    if result.returncode != 0:
        output = (result.stdout or "").strip()
        raise CreationError(f"Failed to create branch '{name}': {output}", output=output)
