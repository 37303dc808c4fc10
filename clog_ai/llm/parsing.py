"""Extraction of the commit log from a free-text LLM reply."""

import re

from clog_ai.llm.exceptions import NoCommitLogError


OUTPUT_PATTERN = re.compile(r"<output>([\s\S]*?)</output>")


def extract_commit_log(raw_response: str) -> str:
    """Extract the text between the first <output> and </output> markers.

    Args:
        raw_response: The raw text response from the LLM.

    Returns:
        The commit log with surrounding whitespace removed.

    Raises:
        NoCommitLogError: If the markers are missing or enclose only whitespace.
    """
    match = OUTPUT_PATTERN.search(raw_response or "")
    commit_log = match.group(1).strip() if match else ""

    if not commit_log:
        raise NoCommitLogError("No commit log generated")

    return commit_log
