import logging
import math

from fastapi import APIRouter

from hostel_api.dependencies import HostelCacheDep, HostelRepositoryDep
from hostel_api.exceptions.custom import HostelNotFoundError
from hostel_api.mappers.pagination import DEFAULT_LIMIT, parse_page_params, parse_positive_int
from hostel_api.mappers.query_builder import build_hostel_query
from hostel_api.schemas.hostel import Hostel, HostelPage, SearchRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/hostel/{name}", response_model=Hostel)
async def get_hostel(name: str, cache: HostelCacheDep) -> Hostel:
    hostel = cache.find_by_name(name)
    if hostel is None:
        raise HostelNotFoundError(name)
    return hostel


@router.get("/hostel-data", response_model=HostelPage)
async def list_hostels_page(
    repository: HostelRepositoryDep,
    page: str | None = None,
    limit: str | None = None,
) -> HostelPage:
    params = parse_page_params(page, limit)

    total = await repository.count()
    hostels = await repository.find_page(params.skip, params.limit)

    return HostelPage(
        totalPages=math.ceil(total / params.limit),
        currentPage=params.page,
        hostels=hostels,
    )


@router.get("/hostels", response_model=list[Hostel])
async def filter_hostels(
    repository: HostelRepositoryDep,
    category: str | None = None,
    rating: str | None = None,
) -> list[Hostel]:
    query = build_hostel_query(category, rating)
    return await repository.find(query)


@router.post("/search", response_model=list[Hostel])
async def search_hostels(
    repository: HostelRepositoryDep,
    request: SearchRequest,
) -> list[Hostel]:
    return await repository.search(request.query)


@router.get("/hostel-limit", response_model=list[Hostel])
async def list_cached_hostels(
    cache: HostelCacheDep,
    limit: str | None = None,
) -> list[Hostel]:
    if not cache.loaded:
        logger.info("Hostel cache not loaded yet, serving empty list")
    return cache.first(parse_positive_int(limit, DEFAULT_LIMIT))
