import asyncio
import logging
import sys
from contextlib import asynccontextmanager, suppress
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from hostel_api.cache import HostelCache
from hostel_api.config import Settings
from hostel_api.exceptions.custom import (
    HostelNotFoundError,
    HostelStoreError,
    InvalidRatingError,
)
from hostel_api.exceptions.handlers import (
    hostel_not_found_error_handler,
    hostel_store_error_handler,
    invalid_rating_error_handler,
)
from hostel_api.routers.hostels import router as hostels_router
from hostel_api.routers.pages import router as pages_router
from hostel_api.services.cache_loader import connect_and_prefetch
from hostel_api.services.hostel_store import HostelRepository


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    repository = HostelRepository.from_settings(settings)
    cache = HostelCache()

    app.state.hostel_repository = repository
    app.state.hostel_cache = cache
    # Requests are served while the store connects and the cache fills
    app.state.cache_loader = asyncio.create_task(connect_and_prefetch(repository, cache))

    try:
        yield
    finally:
        loader = app.state.cache_loader
        if not loader.done():
            loader.cancel()
            with suppress(asyncio.CancelledError):
                await loader
        await repository.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title="Hostel API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(HostelStoreError, hostel_store_error_handler)
    app.add_exception_handler(InvalidRatingError, invalid_rating_error_handler)
    app.add_exception_handler(HostelNotFoundError, hostel_not_found_error_handler)

    app.include_router(pages_router)
    app.include_router(hostels_router)

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir), name="static")
    return app


def run() -> None:
    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
