"""
API module - FastAPI route handlers.

Includes:
- chat.py: Prompt relay to the LLM backend
"""

from api.chat import router as chat_router

__all__ = ["chat_router"]
