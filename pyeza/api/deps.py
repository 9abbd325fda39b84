from typing import Literal, Optional

from fastapi import Query
from pydantic import BaseModel, Field

from pyeza.core.config import get_settings
from pyeza.schemas.pagination import PaginationMode, PaginationRequest
from pyeza.services.pagination import compute_total_pages

settings = get_settings()


class PaginationQuery(BaseModel):
    """Pagination, search, sort and filter state read from the query string."""
    page: int = Field(default=1, ge=1)
    size: int = Field(default=settings.default_page_size, ge=1, le=settings.max_page_size)
    cursor: str = ""
    cursor_direction: Optional[Literal["prev", "next"]] = None
    search: str = ""
    sort: str = ""
    sort_direction: Optional[Literal["asc", "desc"]] = None
    filters: str = ""


def get_pagination_query(
    page: int = Query(1, ge=1),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    cursor: str = Query(""),
    curdir: Optional[Literal["prev", "next"]] = Query(None),
    search: str = Query(""),
    sort: str = Query(""),
    sort_direction: Optional[Literal["asc", "desc"]] = Query(None, alias="dir"),
    filters: str = Query(""),
) -> PaginationQuery:
    return PaginationQuery(
        page=page,
        size=size,
        cursor=cursor,
        cursor_direction=curdir,
        search=search.strip(),
        sort=sort,
        sort_direction=sort_direction,
        filters=filters,
    )


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp a requested page into [1, total_pages]; empty results stay on page 1."""
    return min(max(page, 1), max(total_pages, 1))


def build_offset_request(
    query: PaginationQuery,
    total_rows: int,
    base_url: str,
    body_url: str = "",
) -> PaginationRequest:
    total_pages = compute_total_pages(total_rows, query.size)
    return PaginationRequest(
        mode=PaginationMode.OFFSET,
        page_size=query.size,
        current_page=clamp_page(query.page, total_pages),
        total_rows=total_rows,
        base_url=base_url,
        body_url=body_url,
        search_query=query.search,
        sort_column=query.sort,
        sort_direction=query.sort_direction or "",
        filters_token=query.filters,
    )


def build_cursor_request(
    query: PaginationQuery,
    base_url: str,
    has_next_page: bool,
    has_prev_page: bool,
    next_cursor: str = "",
    prev_cursor: str = "",
    total_rows: int = 0,
    body_url: str = "",
) -> PaginationRequest:
    return PaginationRequest(
        mode=PaginationMode.CURSOR,
        page_size=query.size,
        total_rows=total_rows,
        base_url=base_url,
        body_url=body_url,
        has_next_page=has_next_page,
        has_prev_page=has_prev_page,
        next_cursor=next_cursor,
        prev_cursor=prev_cursor,
        search_query=query.search,
        sort_column=query.sort,
        sort_direction=query.sort_direction or "",
        filters_token=query.filters,
    )
