"""OpenAI provider implementation."""

from typing import Optional

from openai import OpenAI

from clog_ai.llm.base import DEFAULT_MODEL, REQUEST_TIMEOUT, BaseCompletionProvider


class OpenAIProvider(BaseCompletionProvider):
    """OpenAI chat-completion provider (bearer token auth)."""

    name = "OpenAI"

    def __init__(self, api_key: str, model: Optional[str] = None):
        """Initialize the OpenAI provider.

        Args:
            api_key: The OpenAI API key.
            model: The model to use. Defaults to gpt-3.5-turbo-16k when blank.
        """
        super().__init__(model=model or DEFAULT_MODEL)
        self.api_key = api_key

    def create_client(self) -> OpenAI:
        return OpenAI(
            api_key=self.api_key,
            timeout=REQUEST_TIMEOUT,
            max_retries=0,
        )
