import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ghfolio.api.router import api_router
from ghfolio.config import settings
from ghfolio.services.github.cache import get_cache_stats
from ghfolio.services.github.http_client import close_github_client
from ghfolio.services.portfolio.session import PortfolioSession


def setup_logging() -> None:
    """Configure application logging."""
    # Format: timestamp - level - logger name - message
    log_format = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
    date_format = "%H:%M:%S"

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("hpack").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: one portfolio session per process."""
    setup_logging()
    logger.info(f"ghfolio API starting up for GitHub user {settings.github_username}")
    if not settings.github_authenticated:
        logger.warning("No GitHub token configured, requests are limited to 60 per hour")
    app.state.portfolio_session = PortfolioSession()
    yield
    await close_github_client()
    logger.info("ghfolio API shutting down")


app = FastAPI(
    title="ghfolio API",
    description="GitHub portfolio data: profile, statistics and repository listing",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log failed HTTP requests and refreshes, skipping OPTIONS preflight."""
    if request.method == "OPTIONS" or request.url.path == "/health":
        return await call_next(request)

    response = await call_next(request)

    path = request.url.path
    if response.status_code >= 400 or path.endswith("/refresh"):
        logger.info(f"{request.method} {path} -> {response.status_code}")

    return response


app.include_router(api_router)


@app.get("/health")
async def health_check():
    """Health check endpoint with content cache sizes."""
    return {"status": "healthy", "caches": get_cache_stats()}


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("ghfolio.main:app", host="0.0.0.0", port=8000)
