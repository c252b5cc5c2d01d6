import logging

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse

from .custom import HostelNotFoundError, HostelStoreError, InvalidRatingError

logger = logging.getLogger(__name__)


async def hostel_store_error_handler(_request: Request, exc: HostelStoreError) -> JSONResponse:
    logger.error("%s: %s", exc.message, exc.detail)
    return JSONResponse(
        status_code=500,
        content={"message": exc.message, "error": exc.detail},
    )


async def invalid_rating_error_handler(_request: Request, exc: InvalidRatingError) -> JSONResponse:
    logger.warning("Invalid rating value provided: %s", exc.token)
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid rating value provided"},
    )


async def hostel_not_found_error_handler(
    _request: Request, exc: HostelNotFoundError
) -> PlainTextResponse:
    logger.info("Hostel '%s' not in cache", exc.name)
    return PlainTextResponse("Hostel not found", status_code=404)
