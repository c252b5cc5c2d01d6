from typing import Annotated

from fastapi import Depends, Request

from hostel_api.cache import HostelCache
from hostel_api.services.hostel_store import HostelRepository


def get_hostel_repository(request: Request) -> HostelRepository:
    return request.app.state.hostel_repository


def get_hostel_cache(request: Request) -> HostelCache:
    return request.app.state.hostel_cache


HostelRepositoryDep = Annotated[HostelRepository, Depends(get_hostel_repository)]
HostelCacheDep = Annotated[HostelCache, Depends(get_hostel_cache)]
