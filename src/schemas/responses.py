"""Shared error and paging schemas."""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """A single field-level or contextual error detail."""

    field: str | None = None
    message: str


class ErrorBody(BaseModel):
    """Structured error body returned inside every error response."""

    code: str
    message: str
    details: list[ErrorDetail] = []
    request_id: str = Field(alias="requestId")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Top-level error envelope."""

    error: ErrorBody


class PaginationMeta(BaseModel):
    """Paging metadata carried in the pagination response header."""

    total_count: int = Field(alias="totalCount")
    page_size: int = Field(alias="pageSize")
    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")
    previous_page_link: str | None = Field(default=None, alias="previousPageLink")
    next_page_link: str | None = Field(default=None, alias="nextPageLink")

    model_config = {"populate_by_name": True}


class LinkResponse(BaseModel):
    """Documented shape of a hypermedia link."""

    href: str
    rel: str
    method: str
