"""Git diff utilities.

Contains:
- get_working_diff: Diff of the working tree against HEAD, truncated
- truncate_diff: Hard cut of a diff to a maximum number of characters
- DEFAULT_MAX_DIFF_CHARS: Default truncation limit
"""

from clog_ai.git.exceptions import NoChangesError
from clog_ai.git.runner import _run_git_command


DEFAULT_MAX_DIFF_CHARS = 5000


def truncate_diff(diff: str, max_chars: int = DEFAULT_MAX_DIFF_CHARS) -> str:
    """Keep only the first max_chars characters of the diff.

    The cut ignores line and hunk boundaries.
    """
    return diff[:max_chars]


def get_working_diff(max_chars: int = DEFAULT_MAX_DIFF_CHARS) -> str:
    """Get the diff of the working tree against the last commit.

    Args:
        max_chars: Maximum characters for the diff output.

    Returns:
        The diff text, truncated to max_chars.

    Raises:
        NoChangesError: If there is nothing to describe.
        GitError: If git fails (e.g. not a repository, no commits yet).
    """
    diff = _run_git_command(["diff", "HEAD"], strip=False)

    if not diff.strip():
        raise NoChangesError("No changes found. There is nothing to commit.")

    return truncate_diff(diff, max_chars)
