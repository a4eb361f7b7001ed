from fastapi import HTTPException

ENDPOINT_NOT_CONFIGURED = "Azure Foundry endpoint not configured"
PROCESSING_FAILED = "An error occurred while processing your message"


class ChatRelayError(HTTPException):
    """Base for failures rendered to the caller as {"error": detail}."""


class EndpointNotConfiguredException(ChatRelayError):
    def __init__(self, detail: str = ENDPOINT_NOT_CONFIGURED):
        super().__init__(status_code=400, detail=detail)


class ChatProcessingException(ChatRelayError):
    def __init__(self, detail: str = PROCESSING_FAILED):
        super().__init__(status_code=500, detail=detail)


class RemoteCallFailure(Exception):
    """Any failure talking to the inference service, whatever the cause."""
