from functools import lru_cache

from fastapi import Depends, Query

from app.core.config import settings
from app.utils.pagination import Page, PaginationConfig, PaginationRequest, parse_page, resolve


@lru_cache
def get_pagination_config() -> PaginationConfig:
    return settings.pagination


def get_page(
    limit: str | None = Query(default=None),
    page: str | None = Query(default=None),
    config: PaginationConfig = Depends(get_pagination_config),
) -> Page:
    return Page(limit=resolve(config, PaginationRequest.from_query(limit)), page=parse_page(page))


def list_envelope(items: list, *, page: Page, total: int) -> dict:
    return {"data": items, "meta": {"pagination": page.meta(total=total, count=len(items))}}
