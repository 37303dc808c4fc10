"""Azure OpenAI provider implementation.

Requests go to
{base_url}/openai/deployments/{deployment_id}/chat/completions?api-version={api_version}
and authenticate with the api-key header.
"""

from openai import AzureOpenAI

from clog_ai.llm.base import REQUEST_TIMEOUT, BaseCompletionProvider


class AzureProvider(BaseCompletionProvider):
    """Azure OpenAI chat-completion provider."""

    name = "Azure"

    def __init__(
        self,
        api_key: str,
        deployment_id: str,
        base_url: str,
        model: str,
        api_version: str,
    ):
        """Initialize the Azure provider.

        Args:
            api_key: The Azure OpenAI API key.
            deployment_id: The deployment to send requests to.
            base_url: The resource endpoint, e.g. https://name.openai.azure.com
            model: The model name sent in the request body.
            api_version: The api-version query parameter.
        """
        super().__init__(model=model)
        self.api_key = api_key
        self.deployment_id = deployment_id
        self.base_url = base_url
        self.api_version = api_version

    def create_client(self) -> AzureOpenAI:
        return AzureOpenAI(
            api_key=self.api_key,
            azure_endpoint=self.base_url,
            azure_deployment=self.deployment_id,
            api_version=self.api_version,
            timeout=REQUEST_TIMEOUT,
            max_retries=0,
        )
