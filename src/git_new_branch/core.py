"""Core business logic for git-new-branch."""

from collections.abc import Sequence
from datetime import date

from rich.console import Console
from rich.markup import escape

from .backend import BranchBackend
from .naming import build_base_name, pick_available_name

console = Console()


def collect_existing_branches(backend: BranchBackend) -> set[str]:
    """Snapshot local and remote-tracking branch names."""
    return backend.list_local_branches() | backend.list_remote_branches()


def plan_branch_name(
    prefix: str,
    words: Sequence[str],
    backend: BranchBackend,
    today: date | None = None,
) -> tuple[str, str]:
    """
    Work out the branch name without creating anything.

    Args:
        prefix: Branch namespace segment
        words: Description words from the command line (may be empty)
        backend: Source of existing branch names
        today: Date used when falling back to a YYMMDD slug

    Returns:
        (base_name, final_name) tuple; they differ when a suffix was needed

    Raises:
        BranchListError: If existing branches cannot be listed
    """
    base = build_base_name(prefix, words, today=today)
    existing = collect_existing_branches(backend)
    return base, pick_available_name(base, existing)


def create_new_branch(
    prefix: str,
    words: Sequence[str],
    backend: BranchBackend,
    today: date | None = None,
) -> str:
    """
    Create and switch to a new ``<prefix>/<slug>`` branch.

    The existing branch set is read once; a name taken between that read and
    the creation call is rejected by git and reported as CreationError.

    Args:
        prefix: Branch namespace segment
        words: Description words from the command line (may be empty)
        backend: Version-control backend
        today: Date used when falling back to a YYMMDD slug

    Returns:
        Name of the created branch

    Raises:
        BranchListError: If existing branches cannot be listed
        CreationError: If the backend refuses to create the branch
    """
    base, target = plan_branch_name(prefix, words, backend, today=today)
    if target != base:
        console.print(f"[dim]{escape(base)} already exists, using {escape(target)}[/dim]")

    backend.create_and_switch(target)

    console.print(
        f"[bold green]✓[/bold green] Created and switched to branch: [cyan]{escape(target)}[/cyan]"
    )
    return target
