"""Commit creation.

Contains:
- commit_with_message: Run 'git commit -m <message>'
"""

from clog_ai.git.runner import _run_git_command


def commit_with_message(message: str) -> str:
    """Create a commit with the given message.

    The message is handed to git as a single argument, so quotes and shell
    metacharacters end up in the commit verbatim.

    Args:
        message: The full commit message.

    Returns:
        The stdout of git commit.

    Raises:
        GitError: If the commit fails.
    """
    return _run_git_command(["commit", "-m", message])
