# app/application/dtos/response_dto.py

"""
Uniform JSON envelope returned by every endpoint.

Success bodies are ``{success, message?, data?, pagination?}``; error bodies
are ``{success: false, message, code, errors?, error?}``.
"""

import math
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar

from fastapi_pagination.bases import AbstractPage, AbstractParams
from pydantic import Field

from app.application.dtos.base_dto import CustomBaseModel
from app.shared.utils.pagination import PageParams

DataT = TypeVar("DataT")


class PaginationMeta(CustomBaseModel):
    current_page: int
    total_pages: int
    total_records: int
    has_next: bool
    has_prev: bool


class MessageResponse(CustomBaseModel):
    """Success without payload (deletions)."""
    success: bool = True
    message: str


class DataResponse(CustomBaseModel, Generic[DataT]):
    """Success carrying a single record."""
    success: bool = True
    message: Optional[str] = None
    data: DataT


class PaginatedResponse(AbstractPage[DataT], Generic[DataT]):
    """
    Success carrying one page of records.

    Page type built by fastapi-pagination for ``PageParams`` requests,
    with the summary nested under ``pagination``.
    """
    success: bool = True
    data: List[DataT]
    pagination: PaginationMeta

    __params_type__ = PageParams

    @classmethod
    def create(
            cls,
            items: Sequence[DataT],
            params: AbstractParams,
            *,
            total: Optional[int] = None,
            **kwargs: Any,
    ) -> "PaginatedResponse[DataT]":
        if not isinstance(params, PageParams):
            raise TypeError("PaginatedResponse should be used with PageParams")

        total = total or 0
        return cls.model_validate(
            {
                "data": list(items),
                "pagination": {
                    "current_page": params.page,
                    "total_pages": math.ceil(total / params.limit),
                    "total_records": total,
                    "has_next": params.page * params.limit < total,
                    "has_prev": params.page > 1,
                },
                **kwargs,
            },
            from_attributes=True,
        )


class ErrorResponse(CustomBaseModel):
    """Error body, used to document the error status codes."""
    success: bool = False
    message: str
    code: Optional[str] = None
    errors: Optional[List[Dict[str, Any]]] = Field(None, description="Field-level validation errors.")
    error: Optional[str] = Field(None, description="Raw error text of an unexpected failure.")


ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid input or business rule violation"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    500: {"model": ErrorResponse, "description": "Unexpected server error"},
}
