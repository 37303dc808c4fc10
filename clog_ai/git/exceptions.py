"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- NoChangesError: Raised when the working tree has no changes against HEAD
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NoChangesError(GitError):
    """Raised when there are no uncommitted changes."""

    pass
