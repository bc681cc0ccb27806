"""Species chat assistant endpoint."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from species_catalog.services.chat import SpeciesChatService
from species_catalog.utils.logging import get_logger
from species_catalog.web.dependencies import get_chat_service
from species_catalog.web.models import ChatRequest, ChatResponse, ErrorResponse

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    chat_service: Annotated[SpeciesChatService, Depends(get_chat_service)],
    body: Annotated[ChatRequest, Body()],
) -> ChatResponse | JSONResponse:
    """Answer a single species question."""
    if not body.question or not body.question.strip():
        return JSONResponse(ErrorResponse(error="No question provided").model_dump(), status_code=400)

    try:
        answer = await chat_service.generate_response(body.question)
    except Exception as e:
        logger.error("Chat API error", error=str(e), error_type=type(e).__name__)
        return JSONResponse(ErrorResponse(error="Internal server error").model_dump(), status_code=500)

    return ChatResponse(answer=answer)
