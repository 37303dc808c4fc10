"""LLM-related exception classes.

Contains all exception classes for LLM operations:
- LLMError: Base exception for LLM-related errors
- NoCommitLogError: Raised when the reply holds no <output> section
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class NoCommitLogError(LLMError):
    """Raised when no commit log can be extracted from the LLM reply."""

    pass
