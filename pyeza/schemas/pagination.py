"""Pagination schemas: the raw request state and the render-ready display."""

from enum import Enum
from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class PaginationMode(str, Enum):
    OFFSET = "offset"
    CURSOR = "cursor"


class PaginationRequest(BaseModel):
    """Raw pagination state assembled by the data layer for one page view.

    Offset mode reads ``current_page`` and ``total_rows``; cursor mode reads
    the ``has_*_page`` flags and the cursor tokens. Search, sort and filter
    state is carried through to every generated link.
    """

    model_config = ConfigDict(frozen=True)

    mode: PaginationMode
    page_size: int = Field(gt=0)
    base_url: str = ""
    # Base URL for requests that swap only the table body
    body_url: str = ""

    # Offset mode
    current_page: int = Field(default=1, ge=1)
    total_rows: int = Field(default=0, ge=0)

    # Cursor mode
    has_next_page: bool = False
    has_prev_page: bool = False
    next_cursor: str = ""
    prev_cursor: str = ""

    # Query state
    search_query: str = ""
    sort_column: str = ""
    sort_direction: str = ""
    filters_token: str = ""


class NumberedPageButton(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["page"] = "page"
    number: int
    is_active: bool = False
    url: str = ""


class EllipsisPageButton(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["ellipsis"] = "ellipsis"


PageButton = Annotated[Union[NumberedPageButton, EllipsisPageButton], Field(discriminator="kind")]


class PaginationDisplay(BaseModel):
    """Fully resolved pagination view model handed to the template layer."""

    model_config = ConfigDict(frozen=True)

    mode: PaginationMode
    page_size: int
    current_page: int = 1
    total_rows: int = 0
    total_pages: int = 0
    start_row: int = 0
    end_row: int = 0
    has_next_page: bool = False
    has_prev_page: bool = False
    page_buttons: Tuple[PageButton, ...] = ()
    prev_url: str = ""
    next_url: str = ""
    body_url: str = ""

    search_query: str = ""
    sort_column: str = ""
    sort_direction: str = ""
    filters_token: str = ""

    @property
    def active_page_button(self) -> Optional[NumberedPageButton]:
        for button in self.page_buttons:
            if isinstance(button, NumberedPageButton) and button.is_active:
                return button
        return None
