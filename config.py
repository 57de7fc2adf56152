"""
Configuration management for the Groq chat relay.

Loads environment variables from .env file and provides typed access to configuration.
Upstream provider settings (API key, model, timeout) live in infra.InfraConfig.
"""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

from infra import InfraBootstrap

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)

logger = logging.getLogger(__name__)


def _split_origins(raw: str):
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


class Config:
    """Configuration class for the chat relay."""

    # HTTP server
    PORT = int(os.getenv("PORT", "5000"))
    ALLOWED_ORIGINS = _split_origins(os.getenv("ALLOWED_ORIGINS", "*"))

    # Environment
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def validate(cls) -> bool:
        """
        Check that required configuration is set.

        Inspects the same InfraConfig the LLM backend was built from. A missing
        key is only reported here; chat requests fail individually until it is
        provided.
        """
        infra_config = InfraBootstrap.get_instance().config
        if infra_config.llm_backend == "stub":
            return True

        if not infra_config.groq_api_key:
            logger.warning("Missing required environment variables: GROQ_API_KEY")
            logger.warning("Set them in the .env file; chat requests will fail until then")
            return False

        return True


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    infra_config = InfraBootstrap.get_instance().config
    print("Configuration loaded:")
    print(f"  Groq API Key: {'✓ Set' if infra_config.groq_api_key else '✗ Missing'}")
    print(f"  LLM Backend: {infra_config.llm_backend}")
    print(f"  Port: {Config.PORT}")
    print(f"  Environment: {Config.ENVIRONMENT}")
    print(f"  Allowed origins: {', '.join(Config.ALLOWED_ORIGINS)}")
    print(f"\n  Validation: {'✓ PASSED' if Config.validate() else '✗ FAILED'}")
