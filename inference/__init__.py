"""
Model boundary layer for LLM inference.

This package provides a clean abstraction for model invocation,
keeping the HTTP layer agnostic of the upstream provider.

Supported backends:
- GroqModelBackend: Groq chat-completions API (default)
- StubModelBackend: Deterministic fake model (CI / offline runs)

Example usage:
    from inference import GroqModelBackend, ModelRequest

    backend = GroqModelBackend(api_key="gsk_...")
    response = await backend.generate(ModelRequest(prompt="Hello, world!"))
"""

from .types import ModelRequest, ModelResponse, ModelStatus, ModelErrorType
from .base import ModelBackend
from .stub import StubModelBackend
from .groq import GroqModelBackend

__all__ = [
    "ModelRequest",
    "ModelResponse",
    "ModelStatus",
    "ModelErrorType",
    "ModelBackend",
    "StubModelBackend",
    "GroqModelBackend",
]
