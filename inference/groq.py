import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from .base import ModelBackend
from .types import ModelRequest, ModelResponse

logger = logging.getLogger(__name__)

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
GROQ_MODEL = "llama-3.3-70b-versatile"
GROQ_TIMEOUT_S = 30.0

MISSING_KEY_MESSAGE = "GROQ_API_KEY not found in environment variables"

# Fixed generation parameters sent with every completion
GENERATION_PARAMS: Dict[str, Any] = {
    "temperature": 0.7,
    "max_tokens": 500,
    "top_p": 1,
    "stream": False,
}


def _extract_content(data: Any) -> Optional[str]:
    """Pull choices[0].message.content out of a chat-completions body."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    return content if isinstance(content, str) else None


class GroqModelBackend(ModelBackend):
    """
    Groq chat-completions backend (OpenAI-compatible API).

    Performs exactly one POST per generate() call: no retries, no caching.
    Every outcome is returned as a ModelResponse; this class never raises.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str = GROQ_MODEL,
        base_url: str = GROQ_BASE_URL,
        timeout_s: float = GROQ_TIMEOUT_S,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Groq backend.

        Args:
            api_key:   Groq API key. May be None; calls then fail with a
                       configuration error instead of failing at start-up.
            model:     Model identifier sent upstream
            base_url:  Base URL of the OpenAI-compatible API
            timeout_s: Default bound on the whole upstream call (connect,
                       send and response), enforced with asyncio.wait_for
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.transport = transport

    @property
    def url(self) -> str:
        return f"{self.base_url}/chat/completions"

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            **GENERATION_PARAMS,
        }

    def build_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def generate(self, request: ModelRequest) -> ModelResponse:
        """
        Generate a completion using POST /chat/completions.

        Flow:
          1. Fail fast (no I/O) when the API key is missing
          2. POST the single-message conversation
          3. Non-2xx → upstream error carrying status code and raw body
          4. Extract choices[0].message.content, else response_format error

        Args:
            request: ModelRequest with the prompt and optional timeout

        Returns:
            ModelResponse tagged with success or a classified failure
        """
        base_metadata = {
            "backend": "groq",
            "model": self.model,
            "trace_id": request.trace_id,
        }

        if not self.api_key:
            logger.error(MISSING_KEY_MESSAGE)
            return ModelResponse(
                status="fatal_error",
                error_type="configuration",
                error=MISSING_KEY_MESSAGE,
                metadata=base_metadata,
            )

        timeout = request.timeout_s or self.timeout_s

        try:
            logger.info("Calling Groq API...")
            async with httpx.AsyncClient(timeout=timeout, transport=self.transport) as client:
                resp = await asyncio.wait_for(
                    client.post(
                        self.url,
                        headers=self.build_headers(),
                        json=self.build_payload(request.prompt),
                    ),
                    timeout=timeout,
                )

        except (httpx.TimeoutException, asyncio.TimeoutError):
            logger.error(f"Groq API request timed out after {timeout}s")
            return ModelResponse(
                status="recoverable_error",
                error_type="timeout",
                error=f"Groq API request timed out after {timeout}s",
                metadata=base_metadata,
            )

        except httpx.HTTPError as e:
            logger.error(f"Error calling Groq API: {e}")
            return ModelResponse(
                status="recoverable_error",
                error_type="transport",
                error=f"Groq API request error: {e}",
                metadata=base_metadata,
            )

        except Exception as e:
            # e.g. a prompt that cannot be encoded as UTF-8 (lone surrogates)
            logger.error(f"Unexpected error calling Groq API: {e}", exc_info=True)
            return ModelResponse(
                status="fatal_error",
                error_type="transport",
                error=f"Groq API request error: {e}",
                metadata=base_metadata,
            )

        if not resp.is_success:
            body = resp.text
            logger.error(f"Groq API error ({resp.status_code}): {body}")
            retryable = resp.status_code == 429 or resp.status_code >= 500
            return ModelResponse(
                status="recoverable_error" if retryable else "fatal_error",
                error_type="upstream",
                error=f"Groq API request failed: {resp.status_code}",
                metadata={**base_metadata, "status_code": resp.status_code, "body": body},
            )

        try:
            data = resp.json()
        except ValueError:
            data = None

        content = _extract_content(data)
        if content is None:
            logger.error(f"Unexpected Groq response shape: {resp.text[:200]}")
            return ModelResponse(
                status="fatal_error",
                error_type="response_format",
                error="Unexpected response format from Groq API",
                metadata={**base_metadata, "status_code": resp.status_code},
            )

        logger.info("AI response received")
        return ModelResponse(
            status="success",
            output=content,
            metadata={**base_metadata, "status_code": resp.status_code},
        )
