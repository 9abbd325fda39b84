"""
Pagination Display Service

Turns raw pagination state into a render-ready view model:
- Row range (first/last row shown on the current page)
- Navigation flags and prev/next URLs
- Windowed page buttons with ellipses (offset mode)
- Cursor links (cursor mode)
"""

from typing import Callable, Dict, List, Literal, Tuple

import structlog

from pyeza.core.config import get_settings
from pyeza.schemas.pagination import (
    EllipsisPageButton,
    NumberedPageButton,
    PageButton,
    PaginationDisplay,
    PaginationMode,
    PaginationRequest,
)

logger = structlog.get_logger()

# Up to this many pages every page gets a button
MAX_UNWINDOWED_PAGES = 7
WINDOW_RADIUS = 2
MIN_WINDOW_PAGES = 5

DEFAULT_SORT_DIRECTION = "asc"

CursorDirection = Literal["prev", "next"]


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """Ceiling of total_rows / page_size. page_size must be positive."""
    if total_rows <= 0:
        return 0
    return -(-total_rows // page_size)


def compute_row_range(current_page: int, page_size: int, total_rows: int) -> Tuple[int, int]:
    """Return the 1-based inclusive (start_row, end_row) shown on a page."""
    if total_rows == 0:
        return 0, 0
    start_row = (current_page - 1) * page_size + 1
    end_row = min(current_page * page_size, total_rows)
    return start_row, end_row


def _query_state_params(request: PaginationRequest, default_sort_direction: str) -> List[Tuple[str, str]]:
    params: List[Tuple[str, str]] = []
    if request.search_query:
        params.append(("search", request.search_query))
    if request.sort_column:
        params.append(("sort", request.sort_column))
        params.append(("dir", request.sort_direction or default_sort_direction))
    if request.filters_token:
        params.append(("filters", request.filters_token))
    return params


def _join_url(base_url: str, params: List[Tuple[str, str]]) -> str:
    # Values are passed through verbatim; callers encode tokens beforehand.
    query_string = "&".join(f"{key}={value}" for key, value in params)
    return f"{base_url}?{query_string}"


def build_page_url(
    request: PaginationRequest,
    page: int,
    default_sort_direction: str = DEFAULT_SORT_DIRECTION,
) -> str:
    """
    Build the offset-mode URL for a specific page.

    Parameter order is fixed: page, size, search, sort, dir, filters.
    """
    params = [("page", str(page)), ("size", str(request.page_size))]
    params.extend(_query_state_params(request, default_sort_direction))
    return _join_url(request.base_url, params)


def build_cursor_url(
    request: PaginationRequest,
    cursor: str,
    direction: CursorDirection,
    default_sort_direction: str = DEFAULT_SORT_DIRECTION,
) -> str:
    """
    Build the cursor-mode URL for one navigation direction.

    Parameter order is fixed: cursor, curdir, size, search, sort, dir, filters.
    """
    params = [("cursor", cursor), ("curdir", direction), ("size", str(request.page_size))]
    params.extend(_query_state_params(request, default_sort_direction))
    return _join_url(request.base_url, params)


def build_page_buttons(
    current_page: int,
    total_pages: int,
    url_for: Callable[[int], str],
) -> Tuple[PageButton, ...]:
    """
    Generate page buttons with smart windowing.

    Layout: first | ... | window around current | ... | last

    With 7 pages or fewer every page is shown. Beyond that a window of
    2 pages either side of the current page is shown, widened to 5 pages
    when it runs into either end, and padded with the first and last page.
    """
    if total_pages <= 0:
        return ()

    def numbered(number: int) -> NumberedPageButton:
        return NumberedPageButton(number=number, is_active=number == current_page, url=url_for(number))

    if total_pages <= MAX_UNWINDOWED_PAGES:
        return tuple(numbered(number) for number in range(1, total_pages + 1))

    window_start = max(current_page - WINDOW_RADIUS, 1)
    window_end = min(current_page + WINDOW_RADIUS, total_pages)

    if window_end - window_start < MIN_WINDOW_PAGES - 1:
        if window_start == 1:
            window_end = min(MIN_WINDOW_PAGES, total_pages)
        elif window_end == total_pages:
            window_start = max(total_pages - (MIN_WINDOW_PAGES - 1), 1)

    buttons: List[PageButton] = []

    if window_start > 1:
        buttons.append(numbered(1))
        if window_start > 2:
            buttons.append(EllipsisPageButton())

    buttons.extend(numbered(number) for number in range(window_start, window_end + 1))

    if window_end < total_pages:
        if window_end < total_pages - 1:
            buttons.append(EllipsisPageButton())
        buttons.append(numbered(total_pages))

    return tuple(buttons)


class PaginationStateBuilder:
    """
    Builds a PaginationDisplay from a PaginationRequest.

    The builder holds no per-request state: each call reads only its own
    request and returns a freshly constructed display, so one instance can
    be shared across threads.

    Usage:
        builder = PaginationStateBuilder()
        display = builder.build(PaginationRequest(
            mode=PaginationMode.OFFSET,
            page_size=25,
            current_page=3,
            total_rows=480,
            base_url="/action/clients/table",
            sort_column="name",
        ))
        display.next_url  # "/action/clients/table?page=4&size=25&sort=name&dir=asc"
    """

    def __init__(self, default_sort_direction: str = DEFAULT_SORT_DIRECTION):
        self.default_sort_direction = default_sort_direction

    def build(self, request: PaginationRequest) -> PaginationDisplay:
        if request.mode == PaginationMode.OFFSET:
            display = self._build_offset(request)
        else:
            display = self._build_cursor(request)

        logger.debug(
            "pagination.built",
            mode=request.mode.value,
            current_page=display.current_page,
            total_pages=display.total_pages,
            buttons=len(display.page_buttons),
            has_prev=display.has_prev_page,
            has_next=display.has_next_page,
        )
        return display

    def page_url(self, request: PaginationRequest, page: int) -> str:
        return build_page_url(request, page, self.default_sort_direction)

    def cursor_url(self, request: PaginationRequest, cursor: str, direction: CursorDirection) -> str:
        return build_cursor_url(request, cursor, direction, self.default_sort_direction)

    def _build_offset(self, request: PaginationRequest) -> PaginationDisplay:
        total_pages = compute_total_pages(request.total_rows, request.page_size)
        start_row, end_row = compute_row_range(request.current_page, request.page_size, request.total_rows)

        has_next_page = request.current_page < total_pages
        has_prev_page = request.current_page > 1

        prev_url = self.page_url(request, request.current_page - 1) if has_prev_page else ""
        next_url = self.page_url(request, request.current_page + 1) if has_next_page else ""

        page_buttons = build_page_buttons(
            request.current_page,
            total_pages,
            lambda page: self.page_url(request, page),
        )

        return PaginationDisplay(
            mode=request.mode,
            page_size=request.page_size,
            current_page=request.current_page,
            total_rows=request.total_rows,
            total_pages=total_pages,
            start_row=start_row,
            end_row=end_row,
            has_next_page=has_next_page,
            has_prev_page=has_prev_page,
            page_buttons=page_buttons,
            prev_url=prev_url,
            next_url=next_url,
            **_echo_request_state(request),
        )

    def _build_cursor(self, request: PaginationRequest) -> PaginationDisplay:
        prev_url = self._cursor_link(request, request.has_prev_page, request.prev_cursor, "prev")
        next_url = self._cursor_link(request, request.has_next_page, request.next_cursor, "next")

        return PaginationDisplay(
            mode=request.mode,
            page_size=request.page_size,
            current_page=request.current_page,
            total_rows=request.total_rows,
            has_next_page=request.has_next_page,
            has_prev_page=request.has_prev_page,
            prev_url=prev_url,
            next_url=next_url,
            **_echo_request_state(request),
        )

    def _cursor_link(
        self,
        request: PaginationRequest,
        available: bool,
        cursor: str,
        direction: CursorDirection,
    ) -> str:
        if not available:
            return ""
        if not cursor:
            # Flag set without a token: suppress the link rather than fail
            logger.warning("pagination.cursor_token_missing", direction=direction, base_url=request.base_url)
            return ""
        return self.cursor_url(request, cursor, direction)


def _echo_request_state(request: PaginationRequest) -> Dict[str, str]:
    """Fields copied verbatim from the request onto the display."""
    return {
        "body_url": request.body_url,
        "search_query": request.search_query,
        "sort_column": request.sort_column,
        "sort_direction": request.sort_direction,
        "filters_token": request.filters_token,
    }


# Shared instance for convenience
pagination_builder = PaginationStateBuilder(default_sort_direction=get_settings().default_sort_direction)


def build_pagination_display(request: PaginationRequest) -> PaginationDisplay:
    """Build the display for a request with the shared builder."""
    return pagination_builder.build(request)
