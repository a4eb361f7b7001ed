"""
ChatRelay: forwards one storefront chat message to the Phi-4 deployment
and maps the outcome to a reply or a ChatRelayError.

No history is kept between calls; each request builds its own
credential and client.
"""

import logging
from typing import Callable, Optional

from .config import Settings
from .credentials import AzureCredentialProvider
from .exceptions import ChatProcessingException, EndpointNotConfiguredException
from .foundry_client import FoundryChatClient
from .models import ChatReply, ChatRequest

logger = logging.getLogger(__name__)

MODEL_NAME = "Phi-4"
MAX_OUTPUT_TOKENS = 500
TEMPERATURE = 0.7
SYSTEM_PROMPT = (
    "You are a helpful assistant for the Zava Storefront. "
    "Help customers with product information and general inquiries."
)


def build_conversation(message: str) -> list:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": message},
    ]


def default_client_factory(endpoint: str, credential, settings: Settings) -> FoundryChatClient:
    return FoundryChatClient(
        endpoint,
        credential,
        model=MODEL_NAME,
        api_version=settings.api_version,
        timeout=settings.request_timeout,
    )


class ChatRelay:
    def __init__(
        self,
        settings: Settings,
        credential_factory: Callable = AzureCredentialProvider,
        client_factory: Callable = default_client_factory,
    ):
        self.settings = settings
        self.credential_factory = credential_factory
        self.client_factory = client_factory

    async def handle(self, request: ChatRequest) -> ChatReply:
        logger.info("SendMessage called with message: %s", request.message)

        endpoint: Optional[str] = self.settings.foundry_endpoint
        logger.info("AZURE_FOUNDRY_ENDPOINT: %s", endpoint or "null")
        if not endpoint:
            logger.warning("Azure Foundry endpoint not configured")
            raise EndpointNotConfiguredException()

        try:
            credential = self.credential_factory()
            try:
                client = self.client_factory(endpoint, credential, self.settings)
                text = await client.complete(
                    build_conversation(request.message),
                    max_tokens=MAX_OUTPUT_TOKENS,
                    temperature=TEMPERATURE,
                )
            finally:
                credential.close()
        except Exception:
            logger.exception("Error processing chat message")
            raise ChatProcessingException()

        logger.info("Chat message processed successfully. Response: %s", text)
        return ChatReply(response=text)
