import logging

from fastapi import Depends, FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chatbot.config import settings
from chatbot.errors import ChatError, UpstreamError
from chatbot.schemas import ChatRequest, ChatResponse, ErrorResponse
from chatbot.services.chat import ChatService, get_chat_service
from chatbot.services.formatter import format_error

logging.basicConfig(
    level=settings.log_level,
    format="[%(asctime)s] %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Site Assistant Chatbot",
    description="Stateless chat endpoint backed by Gemini and LangChain.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(exc: ChatError, request: ChatRequest) -> JSONResponse:
    payload = format_error(exc, request.conversation_id)
    return JSONResponse(
        status_code=exc.status_code,
        content=payload.model_dump(by_alias=True),
    )


@app.get("/")
async def root() -> dict[str, str]:
    return {
        "message": "Site assistant API is running",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Simple health-check endpoint."""
    return {"status": "ok", "model": settings.gemini_model}


@app.post(
    "/api/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat_endpoint(
    request: ChatRequest,
    service: ChatService = Depends(get_chat_service),
):
    """Accept a user message and return the assistant reply."""
    logger.info(
        "Incoming chat: conversation_id=%s history_turns=%s",
        request.conversation_id,
        len(request.history or []),
    )
    try:
        return await run_in_threadpool(service.handle, request)
    except UpstreamError as exc:
        logger.exception("Chat generation failed: %s", exc.detail)
        return _error_response(exc, request)
    except ChatError as exc:
        logger.warning("Chat request rejected (%s): %s", exc.kind, exc.detail)
        return _error_response(exc, request)
    except Exception as exc:
        logger.exception("Unexpected chat failure")
        return _error_response(UpstreamError(str(exc)), request)
