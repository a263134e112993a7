"""Typer-based CLI interface for git-new-branch."""

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .backend import GitBackend
from .constants import PREFIX_ENV_VAR
from .core import create_new_branch
from .exceptions import GnbError
from .git_utils import get_repo_root
from .identity import resolve_prefix

app = typer.Typer(
    name="gnb",
    help="Create git branches with username prefix",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()
err_console = Console(stderr=True)

EPILOG = f"""\
Examples:

  gnb            Create <username>/YYMMDD

  gnb ABC-123    Create <username>/abc-123

  gnb fix login  Create <username>/fix-login

Set {PREFIX_ENV_VAR} to override the username prefix (e.g. {PREFIX_ENV_VAR}=ci-bot).
The branch starts at the current HEAD. Names that already exist locally or on
a remote get a numeric suffix (_2, _3, ...).
"""


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"gnb version {__version__}")
        raise typer.Exit()


@app.command(epilog=EPILOG)
def main(
    words: list[str] | None = typer.Argument(
        None,
        help="Branch description or ticket id (defaults to today's date as YYMMDD)",
        show_default=False,
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """
    Create a new git branch prefixed with your username and switch to it.
    """
    try:
        repo = get_repo_root()
        prefix = resolve_prefix()
        create_new_branch(prefix, words or [], GitBackend(repo))
    except GnbError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
