"""Ambient Azure credential used to authenticate against the Foundry endpoint."""

from azure.identity import DefaultAzureCredential

COGNITIVE_SERVICES_SCOPE = "https://cognitiveservices.azure.com/.default"


class AzureCredentialProvider:
    """
    Hands out bearer tokens from the DefaultAzureCredential chain
    (environment, managed identity, developer login).

    Token caching and refresh are left to azure-identity.
    """

    def __init__(self, scope: str = COGNITIVE_SERVICES_SCOPE):
        self.scope = scope
        self._credential = DefaultAzureCredential()

    def get_token(self) -> str:
        return self._credential.get_token(self.scope).token

    def close(self) -> None:
        self._credential.close()
