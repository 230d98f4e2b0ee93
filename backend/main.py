from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import declension
from core.config import settings
from core.errors import register_error_handlers
from core.logging import configure_logging, get_logger
from core.middleware import RequestLoggingMiddleware
from engines.declension import build_resolver
from ingest.clients import WiktionaryClient, create_http_client

# Initialize logging before anything else
configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("startup", message="Padezh API starting up")

    http = create_http_client(settings)
    client = WiktionaryClient(http, settings)
    app.state.resolver = build_resolver(client, settings)
    log.info(
        "resolver_ready",
        sources=[s.name for s in app.state.resolver.sources],
        cache_ttl=settings.DECLENSION_CACHE_TTL,
    )

    yield

    log.info("shutdown", message="Padezh API shutting down")
    await http.aclose()


app = FastAPI(
    title="Padezh API",
    description="Russian noun declension resolver backed by Wiktionary, irregular-noun tables and suffix rules",
    version="0.1.0",
    lifespan=lifespan,
)

register_error_handlers(app)

# Anything past one upstream timeout is flagged as slow
app.add_middleware(
    RequestLoggingMiddleware,
    slow_threshold_ms=settings.DECLENSION_REQUEST_TIMEOUT * 1000,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(declension.router, prefix="/api/declension", tags=["declension"])


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": "0.1.0"}


if __name__ == "__main__":
    import uvicorn

    log.info("server_config", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT, debug=settings.APP_DEBUG)
    uvicorn.run(
        "main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.APP_DEBUG,
        log_config=None,  # Disable uvicorn's default logging, we handle it
    )
