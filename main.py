"""
FastAPI Application Entry Point

Integrates:
  - Chat relay route (POST /api/chat)
  - Service descriptor (GET /)
  - Middleware for CORS, logging & error handling

Run: uvicorn main:app --reload --host 0.0.0.0 --port 5000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from api import chat_router
from config import Config

# Setup logging
logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


SERVICE_DESCRIPTOR = {
    "status": "running",
    "message": "AI Chat Backend with Groq API",
    "endpoints": {
        "chat": "POST /api/chat",
        "health": "GET /",
    },
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.
    """
    # Startup
    logger.info("=" * 60)
    logger.info("AI Chat Server starting up...")
    logger.info(f"Port: {Config.PORT}")
    logger.info("AI Provider: Groq")
    logger.info(f"Environment: {Config.ENVIRONMENT}")
    logger.info(f"API Endpoint: http://localhost:{Config.PORT}/api/chat")
    logger.info("=" * 60)
    Config.validate()

    yield

    # Shutdown
    logger.info("AI Chat Server shutting down...")


# Create FastAPI app
app = FastAPI(
    title="AI Chat Backend",
    description="Prompt relay to the Groq chat-completions API",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Middleware for logging
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    logger.debug(f"{request.method} {request.url.path}")
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"Request error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )


# Include routers
app.include_router(chat_router)


@app.get("/")
async def root():
    """Service status and available endpoints."""
    return SERVICE_DESCRIPTOR


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=Config.PORT,
        reload=Config.ENVIRONMENT == "development",
    )
