"""Base classes and shared settings for completion providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from clog_ai.llm.exceptions import LLMError


DEFAULT_MODEL = "gpt-3.5-turbo-16k"

# Seconds to wait for the completion endpoint
REQUEST_TIMEOUT = 100.0

# Sampling parameters shared by every request
COMPLETION_PARAMS = {
    "temperature": 0,
    "top_p": 1,
    "frequency_penalty": 0,
    "presence_penalty": 0,
}


@dataclass
class LLMResult:
    """Result from a commit log generation, including the raw reply."""

    commit_log: str
    raw_response: str
    model: str
    prompt_chars: int = 0
    output_chars: int = 0


class BaseCompletionProvider(ABC):
    """Abstract base class for chat-completion providers.

    Subclasses only decide how the client is built (endpoint, auth and
    model). The request itself is the same for every provider.
    """

    name = "LLM"

    def __init__(self, model: str):
        self.model = model

    @abstractmethod
    def create_client(self):
        """Create the SDK client used to send the request."""
        pass

    def build_messages(self, prompt: str) -> list[dict]:
        """Wrap the prompt in a single user message."""
        return [{"role": "user", "content": prompt}]

    def complete(self, prompt: str) -> str:
        """Send the prompt and return the first choice's message content.

        Args:
            prompt: The rendered prompt.

        Returns:
            The raw text of the reply.

        Raises:
            LLMError: For transport failures, error statuses and malformed replies.
        """
        client = self.create_client()

        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(prompt),
                **COMPLETION_PARAMS,
            )
            content = response.choices[0].message.content
        except LLMError:
            raise
        except Exception as e:
            raise LLMError(f"{self.name} API call failed: {e}")

        if content is None:
            raise LLMError(f"{self.name} API returned an empty response")

        return content
