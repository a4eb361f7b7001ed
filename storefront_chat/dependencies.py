from fastapi import Depends

from .config import Settings, get_settings
from .relay import ChatRelay


def get_chat_relay(settings: Settings = Depends(get_settings)) -> ChatRelay:
    return ChatRelay(settings)
