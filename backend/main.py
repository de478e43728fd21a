import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from config import settings
from routers import health, entries
from services.entry_store import EntryStore
from services.seed_service import seed_store

logger = logging.getLogger(__name__)


def create_app(
    store: EntryStore | None = None, write_rate_limit: str | None = None
) -> FastAPI:
    """Build the API around ``store``.

    Without a store, a fresh one is created and filled from the bundled
    dataset when ``settings.seed_on_startup`` is set. Each app gets its own
    rate limiter; ``write_rate_limit`` overrides ``settings.write_rate_limit``.
    """
    logging.basicConfig(level=settings.log_level)

    if store is None:
        store = EntryStore()
        if settings.seed_on_startup:
            seed_store(store, settings.seed_data_path)

    app = FastAPI(title="CovidStats", version="0.1.0")

    app.state.entry_store = store
    limiter = Limiter(key_func=get_remote_address)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(
        entries.create_router(limiter, write_rate_limit or settings.write_rate_limit)
    )

    @app.get("/")
    async def root():
        return {
            "name": "CovidStats API",
            "version": "0.1.0",
            "endpoints": ["/health", "/entries", "/entries/{iso_code}"],
        }

    @app.on_event("startup")
    async def startup():
        logger.info("CovidStats API is running with %d entries", len(app.state.entry_store))

    return app


app = create_app()
