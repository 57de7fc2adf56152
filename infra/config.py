"""
Infrastructure configuration system.

Environment-based backend selection with sensible defaults.
The API key is read here once and injected into the backend.
"""

import logging
import os
from typing import Optional, Literal
from dataclasses import dataclass

from inference import ModelBackend, StubModelBackend, GroqModelBackend
from inference.groq import GROQ_BASE_URL, GROQ_MODEL, GROQ_TIMEOUT_S


LLMBackendType = Literal["groq", "stub"]
KNOWN_LLM_BACKENDS = ("groq", "stub")

logger = logging.getLogger(__name__)


@dataclass
class InfraConfig:
    """Infrastructure configuration from environment."""

    llm_backend: LLMBackendType
    groq_api_key: Optional[str]
    groq_model: str
    groq_base_url: str
    groq_timeout_s: float

    @classmethod
    def from_env(cls) -> "InfraConfig":
        """
        Load configuration from environment variables.

        GROQ_API_KEY has no default; an empty value is treated as unset.
        """
        return cls(
            llm_backend=os.getenv("LLM_BACKEND", "groq"),  # type: ignore
            groq_api_key=os.getenv("GROQ_API_KEY") or None,
            groq_model=os.getenv("GROQ_MODEL", GROQ_MODEL),
            groq_base_url=os.getenv("GROQ_BASE_URL", GROQ_BASE_URL),
            groq_timeout_s=float(os.getenv("GROQ_TIMEOUT_S", str(GROQ_TIMEOUT_S))),
        )

    def create_llm_backend(self) -> ModelBackend:
        """Create LLM backend instance based on configuration."""
        if self.llm_backend == "stub":
            return StubModelBackend()
        if self.llm_backend not in KNOWN_LLM_BACKENDS:
            logger.warning(f"Unknown LLM_BACKEND '{self.llm_backend}', falling back to groq")
        return GroqModelBackend(
            api_key=self.groq_api_key,
            model=self.groq_model,
            base_url=self.groq_base_url,
            timeout_s=self.groq_timeout_s,
        )


def get_config() -> InfraConfig:
    """Get infrastructure configuration from the current environment."""
    return InfraConfig.from_env()
