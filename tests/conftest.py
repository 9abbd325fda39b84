"""Pytest configuration and fixtures for pyeza tests."""

import pytest

from pyeza.schemas.pagination import PaginationMode, PaginationRequest
from pyeza.services.pagination import PaginationStateBuilder

BASE_URL = "/action/clients/table"


@pytest.fixture
def builder():
    """A builder with the default "asc" sort direction."""
    return PaginationStateBuilder()


@pytest.fixture
def offset_request():
    """Factory for offset-mode requests against the test base URL."""
    def make(current_page: int = 1, total_rows: int = 0, page_size: int = 10, **query_state) -> PaginationRequest:
        return PaginationRequest(
            mode=PaginationMode.OFFSET,
            page_size=page_size,
            current_page=current_page,
            total_rows=total_rows,
            base_url=BASE_URL,
            **query_state,
        )
    return make


@pytest.fixture
def cursor_request():
    """Factory for cursor-mode requests against the test base URL."""
    def make(page_size: int = 25, **fields) -> PaginationRequest:
        return PaginationRequest(
            mode=PaginationMode.CURSOR,
            page_size=page_size,
            base_url=BASE_URL,
            **fields,
        )
    return make
