"""
Chat Route Handler

Validates an inbound prompt, forwards it to the configured LLM backend
and translates the tagged backend result into an HTTP response.

Request Flow:
  POST /api/chat → validate_prompt → backend.generate → JSON response
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from inference import ModelBackend, ModelRequest
from infra import InfraBootstrap

# Setup logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api", tags=["chat"])

MAX_PROMPT_CHARS = 500
PROVIDER_NAME = "Groq AI"

PROMPT_REQUIRED = "Prompt is required"
PROMPT_TOO_LONG = f"Prompt is too long (max {MAX_PROMPT_CHARS} characters)"
GENERATION_FAILED = "Failed to generate response"


class ChatResponse(BaseModel):
    response: str
    timestamp: str
    provider: str = PROVIDER_NAME


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


def get_llm_backend() -> ModelBackend:
    """FastAPI dependency returning the process-wide backend."""
    return InfraBootstrap.get_instance().get_llm_backend()


def validate_prompt(prompt: Any) -> Optional[str]:
    """
    Return the validation error message for a prompt, or None if it is valid.

    Length is measured in characters; 500 is still accepted.
    """
    if not isinstance(prompt, str) or not prompt:
        return PROMPT_REQUIRED
    if len(prompt) > MAX_PROMPT_CHARS:
        return PROMPT_TOO_LONG
    return None


def iso_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def _read_prompt(request: Request) -> Any:
    try:
        body = await request.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    return body.get("prompt")


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(request: Request, backend: ModelBackend = Depends(get_llm_backend)):
    """
    Generate a completion for a single prompt.

    Expected payload:
    {
        "prompt": "Explain quantum computing in one sentence"
    }

    Returns:
        200 {"response", "timestamp", "provider"} on success
        400 {"error"} when the prompt is missing or too long
        500 {"error", "details"} when the backend fails
    """
    prompt = await _read_prompt(request)

    error = validate_prompt(prompt)
    if error:
        logger.info(f"Rejected prompt: {error}")
        return JSONResponse(status_code=400, content=ErrorResponse(error=error).model_dump(exclude_none=True))

    logger.info(f"Received prompt: {prompt[:50]}")

    result = await backend.generate(ModelRequest(prompt=prompt))

    if not result.ok:
        logger.error(f"Error generating response ({result.error_type}): {result.error}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=GENERATION_FAILED, details=result.error or "").model_dump(),
        )

    return ChatResponse(response=result.output or "", timestamp=iso_timestamp())
