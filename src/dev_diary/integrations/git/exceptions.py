"""Custom exceptions for git repository access."""


class GitError(Exception):
    """Base exception for git errors."""

    pass


class GitNotFoundError(GitError):
    """Raised when the git executable is not available."""

    pass


class GitCommandError(GitError):
    """Raised when a git command exits with a failure."""

    pass
