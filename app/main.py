"""Main FastAPI application entry point."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import settings
from app.routes import ask
from campus.utils.logger import logger

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    debug=settings.DEBUG
)


@app.on_event("startup")
async def startup_event():
    """Log configuration on startup."""
    logger.info("Campus Guide Ask API Starting...")
    logger.info(f"OpenAI credential: {'set' if settings.OPENAI_API_KEY else 'missing (asks will fail with 500)'}")
    logger.info(f"Completion backend: {settings.OPENAI_BASE_URL} model={settings.OPENAI_MODEL} max_tokens={settings.ASK_MAX_TOKENS} temperature={settings.ASK_TEMPERATURE}")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(ask.router, prefix="/api", tags=["Ask"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Campus Guide Ask API",
        "version": settings.API_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
