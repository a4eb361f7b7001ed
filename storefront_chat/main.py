"""
Chat Service
Handles: storefront chat page, relaying customer messages to the Phi-4 model
Port: 8002
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from .config import get_settings
from .dependencies import get_chat_relay
from .exceptions import ChatRelayError
from .models import ChatErrorResponse, ChatReply, ChatRequest, HealthResponse
from .relay import ChatRelay

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


# ── App ───────────────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("[chat-service] Started, endpoint configured: %s", bool(settings.foundry_endpoint))
    yield


app = FastAPI(title="Zava Storefront Chat", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ChatRelayError)
async def chat_relay_error(request: Request, exc: ChatRelayError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


# ── Endpoints ─────────────────────────────────────────────────────────────────

@app.get("/Chat/Index")
@app.get("/Chat")
async def index():
    return FileResponse(str(STATIC_DIR / "chat.html"))


@app.post(
    "/Chat/SendMessage",
    response_model=ChatReply,
    responses={400: {"model": ChatErrorResponse}, 500: {"model": ChatErrorResponse}},
)
async def send_message(request: ChatRequest, relay: ChatRelay = Depends(get_chat_relay)):
    return await relay.handle(request)


@app.get("/health", response_model=HealthResponse)
async def health():
    return {"status": "ok", "service": "chat"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("storefront_chat.main:app", host="0.0.0.0", port=8002, reload=True)
