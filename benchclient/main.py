"""BenchClient API Server"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from benchclient.api import api_router
from benchclient.config import get_settings
from benchclient.core.exceptions import BenchClientError

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

USAGE = """
BenchClient (Python)
POST /bench       -> run one benchmark call
GET  /metrics     -> Prometheus metrics
GET  /healthz     -> liveness probe
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    logger.info(
        f"Benchmarking {settings.generate_url} "
        f"(runtime={settings.runtime_label}, test_env={settings.test_env_label})"
    )
    logger.info(f"BenchClient running on :{settings.port}")

    yield

    logger.info("Shutting down BenchClient...")


app = FastAPI(
    title=settings.app_name,
    description="Streaming inference latency and throughput benchmark client",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(BenchClientError)
async def benchclient_exception_handler(request: Request, exc: BenchClientError):
    """Render benchmark failures as a single error object."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


app.include_router(api_router)


@app.get("/healthz", response_class=PlainTextResponse)
async def healthz():
    """Liveness probe"""
    return "ok"


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "app": settings.app_name}


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Plain-text route listing"""
    return USAGE


def run():
    """Start the server with uvicorn"""
    import uvicorn

    uvicorn.run(
        "benchclient.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
