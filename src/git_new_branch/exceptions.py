"""Exception hierarchy for git-new-branch."""


class GnbError(Exception):
    """Base error for all git-new-branch failures."""


class IdentityError(GnbError):
    """Raised when no usable branch prefix can be determined."""


class GitError(GnbError):
    """Raised when a git invocation fails."""

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


class NotARepositoryError(GitError):
    """Raised when the working directory is not inside a git work tree."""


class BranchListError(GitError):
    """Raised when existing branch names cannot be listed."""


class CreationError(GitError):
    """Raised when git refuses to create or switch to the new branch."""
