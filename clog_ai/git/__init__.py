"""Git helpers for clog-ai.

This package provides:
- exceptions: GitError, NoChangesError
- runner: _run_git_command
- diff: get_working_diff, truncate_diff, DEFAULT_MAX_DIFF_CHARS
- commit: commit_with_message
"""

from clog_ai.git.exceptions import (
    GitError,
    NoChangesError,
)
from clog_ai.git.runner import _run_git_command
from clog_ai.git.diff import (
    DEFAULT_MAX_DIFF_CHARS,
    get_working_diff,
    truncate_diff,
)
from clog_ai.git.commit import commit_with_message


__all__ = [
    "GitError",
    "NoChangesError",
    "_run_git_command",
    "DEFAULT_MAX_DIFF_CHARS",
    "get_working_diff",
    "truncate_diff",
    "commit_with_message",
]
