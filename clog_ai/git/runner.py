"""Git command runner.

Contains:
- _run_git_command: Run a git command and return its output
"""

import subprocess

from clog_ai.git.exceptions import GitError


def _run_git_command(args: list[str], strip: bool = True) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        strip: Whether to strip surrounding whitespace from stdout.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")

    return result.stdout.strip() if strip else result.stdout
