import asyncio
import logging
from typing import Optional

import httpx

from .exceptions import RemoteCallFailure

logger = logging.getLogger(__name__)


class FoundryChatClient:
    """Chat-completions client for a model deployed on an Azure AI Foundry endpoint."""

    def __init__(
        self,
        endpoint: str,
        credential,
        model: str,
        api_version: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint = endpoint.rstrip("/")
        self.credential = credential
        self.model = model
        self.api_version = api_version
        self.timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self.endpoint}/openai/deployments/{self.model}/chat/completions"

    async def complete(self, messages: list, max_tokens: int, temperature: float) -> str:
        """
        Send one non-streaming completion request and return the first choice's text.
        Every failure (auth, transport, HTTP status, response shape) is raised as
        RemoteCallFailure chained to the original error.
        """
        try:
            # get_token blocks (az CLI subprocess, IMDS request)
            token = await asyncio.to_thread(self.credential.get_token)
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.url,
                    params={"api-version": self.api_version},
                    headers={
                        "Authorization": f"Bearer {token}",
                        "Content-Type": "application/json",
                    },
                    json={
                        "messages": messages,
                        "max_tokens": max_tokens,
                        "temperature": temperature,
                    },
                )
                response.raise_for_status()
                result = response.json()
        except Exception as e:
            raise RemoteCallFailure(f"Foundry request failed: {e}") from e

        choices = result.get("choices") if isinstance(result, dict) else None
        if not choices:
            raise RemoteCallFailure("Foundry response contained no choices")
        try:
            content = choices[0]["message"]["content"]
        except (KeyError, TypeError) as e:
            raise RemoteCallFailure(f"Malformed Foundry response: {e}") from e
        if not isinstance(content, str):
            raise RemoteCallFailure("Foundry response contained no content")

        usage = result.get("usage") or {}
        logger.debug("Foundry completion used %s tokens", usage.get("total_tokens", 0))
        return content
