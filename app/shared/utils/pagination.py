# app/shared/utils/pagination.py

from fastapi import Query
from fastapi_pagination.bases import AbstractParams, RawParams
from pydantic import BaseModel, Field

from app.adapters.configuration.config import settings

DEFAULT_PAGE_SIZE = settings.DEFAULT_PAGE_SIZE
MAX_PAGE_SIZE = settings.MAX_PAGE_SIZE

# Keeps page * MAX_PAGE_SIZE, and so the OFFSET, inside a signed 64-bit integer
MAX_PAGE = (2 ** 63 - 1) // MAX_PAGE_SIZE


class PageParams(BaseModel, AbstractParams):
    """Offset pagination request: 1-based page number and page size."""

    page: int = Field(1, ge=1, le=MAX_PAGE)
    limit: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    def to_raw_params(self) -> RawParams:
        return RawParams(limit=self.limit, offset=self.limit * (self.page - 1))


def pagination_params(
        page: int = Query(1, ge=1, le=MAX_PAGE, description="Page number"),
        limit: int = Query(
            DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Items per page"
        ),
) -> PageParams:
    return PageParams(page=page, limit=limit)
