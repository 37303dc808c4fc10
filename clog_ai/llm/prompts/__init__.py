"""LLM prompt templates for commit log generation.

This package contains the two fixed templates:
- zh: Chinese instructions
- en: English instructions

Both ask for a single commit log starting with one of the agreed prefixes
and wrapped in <output> and </output> tags.
"""

from clog_ai.config import Language
from clog_ai.llm.prompts.en import TEMPLATE_EN
from clog_ai.llm.prompts.zh import TEMPLATE_ZH


DIFF_PLACEHOLDER = "{{diff}}"

COMMIT_PREFIXES = ["feat", "fix", "docs", "style", "refactor", "test", "chore"]


def get_template(language: str) -> str:
    """Get the template for a language. Anything other than zh is English."""
    if language == Language.ZH.value:
        return TEMPLATE_ZH
    return TEMPLATE_EN


def render_prompt(diff: str, language: str) -> str:
    """Substitute the diff into the template for the given language.

    Args:
        diff: The (already truncated) diff text.
        language: The configured language preference.

    Returns:
        The prompt to send to the completion provider.
    """
    return get_template(language).replace(DIFF_PLACEHOLDER, diff, 1)


__all__ = [
    "DIFF_PLACEHOLDER",
    "COMMIT_PREFIXES",
    "TEMPLATE_EN",
    "TEMPLATE_ZH",
    "get_template",
    "render_prompt",
]
