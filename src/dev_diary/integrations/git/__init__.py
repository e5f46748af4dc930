"""Git repository integration."""

from .exceptions import GitCommandError, GitError, GitNotFoundError
from .git_client import GitRepository

__all__ = ["GitCommandError", "GitError", "GitNotFoundError", "GitRepository"]
