"""Completion provider module for clog-ai.

This module turns a diff into a commit log through one of two
chat-completion providers, selected by the configured datasource.
"""

from clog_ai.config import Configuration, DataSource
from clog_ai.llm.base import BaseCompletionProvider, LLMResult
from clog_ai.llm.exceptions import LLMError, NoCommitLogError
from clog_ai.llm.parsing import extract_commit_log
from clog_ai.llm.prompts import render_prompt


def get_provider(config: Configuration) -> BaseCompletionProvider:
    """Get the completion provider for the configured datasource.

    Args:
        config: The validated configuration.

    Returns:
        An instance of the matching provider.

    Raises:
        ValueError: If the datasource is not supported.
    """
    if config.datasource == DataSource.OPENAI.value:
        from clog_ai.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(
            api_key=config.openai_api_key,
            model=config.openai_model,
        )

    elif config.datasource == DataSource.AZURE.value:
        from clog_ai.llm.azure_provider import AzureProvider

        return AzureProvider(
            api_key=config.azure_api_key,
            deployment_id=config.azure_deployment_id,
            base_url=config.azure_base_url,
            model=config.azure_model,
            api_version=config.azure_api_version,
        )

    else:
        raise ValueError(f"Unsupported datasource: {config.datasource}")


def generate_commit_log(
    provider: BaseCompletionProvider,
    diff: str,
    language: str,
) -> LLMResult:
    """Generate a commit log for the diff.

    Args:
        provider: The completion provider to call.
        diff: The truncated diff text.
        language: The configured language preference.

    Returns:
        An LLMResult with the extracted commit log and the raw reply.

    Raises:
        NoCommitLogError: If the reply holds no <output> section.
        LLMError: For any failure of the completion call.
    """
    prompt = render_prompt(diff, language)
    raw_response = provider.complete(prompt)
    commit_log = extract_commit_log(raw_response)

    return LLMResult(
        commit_log=commit_log,
        raw_response=raw_response,
        model=provider.model,
        prompt_chars=len(prompt),
        output_chars=len(raw_response),
    )


__all__ = [
    "BaseCompletionProvider",
    "LLMError",
    "LLMResult",
    "NoCommitLogError",
    "extract_commit_log",
    "generate_commit_log",
    "get_provider",
]
