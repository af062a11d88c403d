# /app/main.py

# --- Core FastAPI Imports ---
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# --- Application-specific Imports ---
from .core import config
from .core.logging_config import setup_logging
from .db.database import init_db
from .routers import (
    ai_router,
    analytics_router,
    articles_router,
    auth_router,
    blogs_router,
    chat_router,
    dashboard_router,
    users_router,
)

setup_logging()
logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once at startup.
    init_db()
    if config.get_openrouter_api_key():
        logger.info("AI assistant running in live mode (model: %s).", config.OPENROUTER_MODEL)
    else:
        logger.warning("OPENROUTER_API_KEY not set; AI assistant will serve demo content.")
    yield


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title=config.APP_TITLE,
    description="Backend for BlogVerse: blogs, articles, analytics and the AI writing assistant.",
    version=config.APP_VERSION,
    lifespan=lifespan,
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error Rendering ---
# Every error leaves the API as {"error": "..."}; a dict detail is sent as-is.
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    content = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.debug("Rejected invalid request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid input"})


# --- API Router Inclusion ---
app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"])
app.include_router(users_router.router, prefix="/api/user", tags=["User"])
app.include_router(blogs_router.router, prefix="/api/blogs", tags=["Blogs"])
app.include_router(articles_router.router, prefix="/api/articles", tags=["Articles"])
app.include_router(analytics_router.router, prefix="/api/analytics", tags=["Analytics"])
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(chat_router.router, prefix="/api/chat", tags=["AI Chat History"])
app.include_router(ai_router.router, prefix="/api/ai", tags=["AI Assistant"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "BlogVerse Backend is running!", "version": app.version}
