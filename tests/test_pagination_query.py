"""Tests for reading pagination query parameters and assembling requests."""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from pydantic import ValidationError

from pyeza.api.deps import (
    PaginationQuery,
    build_cursor_request,
    build_offset_request,
    clamp_page,
    get_pagination_query,
    settings,
)
from pyeza.schemas.pagination import PaginationMode
from pyeza.services.pagination import build_pagination_display

app = FastAPI()


@app.get("/action/clients/table")
def clients_table(query: PaginationQuery = Depends(get_pagination_query)):
    display = build_pagination_display(build_offset_request(query, total_rows=240, base_url="/action/clients/table"))
    return {"query": query.model_dump(), "next_url": display.next_url, "current_page": display.current_page}


client = TestClient(app)


class TestPaginationQueryDependency:

    def test_defaults(self):
        response = client.get("/action/clients/table")

        assert response.status_code == 200
        data = response.json()["query"]
        assert data["page"] == 1
        assert data["size"] == 25
        assert data["cursor"] == ""
        assert data["cursor_direction"] is None
        assert data["search"] == ""
        assert data["sort"] == ""
        assert data["sort_direction"] is None
        assert data["filters"] == ""

    def test_reads_wire_parameter_names(self):
        response = client.get(
            "/action/clients/table",
            params={
                "page": 3,
                "size": 50,
                "cursor": "abc",
                "curdir": "prev",
                "search": "acme",
                "sort": "name",
                "dir": "desc",
                "filters": "W10=",
            },
        )

        assert response.status_code == 200
        data = response.json()["query"]
        assert data["page"] == 3
        assert data["size"] == 50
        assert data["cursor"] == "abc"
        assert data["cursor_direction"] == "prev"
        assert data["search"] == "acme"
        assert data["sort"] == "name"
        assert data["sort_direction"] == "desc"
        assert data["filters"] == "W10="

    @pytest.mark.parametrize(
        "params",
        [
            {"page": 0},
            {"size": 0},
            {"size": 1000},
            {"dir": "sideways"},
            {"curdir": "up"},
        ],
    )
    def test_invalid_parameters_are_rejected(self, params):
        response = client.get("/action/clients/table", params=params)
        assert response.status_code == 422

    def test_page_past_the_end_is_clamped(self):
        response = client.get("/action/clients/table", params={"page": 99, "size": 25})

        assert response.status_code == 200
        data = response.json()
        assert data["current_page"] == 10
        assert data["next_url"] == ""

    def test_search_is_trimmed(self):
        response = client.get("/action/clients/table", params={"search": "  acme "})
        assert response.json()["query"]["search"] == "acme"


class TestClampPage:

    @pytest.mark.parametrize(
        "page,total_pages,expected",
        [
            (1, 10, 1),
            (5, 10, 5),
            (11, 10, 10),
            (0, 10, 1),
            (3, 0, 1),
        ],
    )
    def test_clamp(self, page, total_pages, expected):
        assert clamp_page(page, total_pages) == expected


class TestRequestAssembly:

    def test_offset_request_carries_query_state(self):
        query = PaginationQuery(page=2, size=10, search="acme", sort="name", sort_direction="desc", filters="W10=")

        request = build_offset_request(query, total_rows=45, base_url="/t")

        assert request.mode == PaginationMode.OFFSET
        assert request.current_page == 2
        assert request.page_size == 10
        assert request.total_rows == 45
        assert request.search_query == "acme"
        assert request.sort_column == "name"
        assert request.sort_direction == "desc"
        assert request.filters_token == "W10="

    def test_offset_request_without_direction(self):
        request = build_offset_request(PaginationQuery(sort="name"), total_rows=45, base_url="/t")
        assert request.sort_direction == ""

    def test_cursor_request(self):
        query = PaginationQuery(size=20, cursor="abc", cursor_direction="next", search="acme")

        request = build_cursor_request(
            query,
            base_url="/t",
            has_next_page=True,
            has_prev_page=True,
            next_cursor="def",
            prev_cursor="abc",
        )
        display = build_pagination_display(request)

        assert request.mode == PaginationMode.CURSOR
        assert display.next_url == "/t?cursor=def&curdir=next&size=20&search=acme"
        assert display.prev_url == "/t?cursor=abc&curdir=prev&size=20&search=acme"


class TestPaginationQueryModel:

    def test_size_above_maximum_is_rejected(self):
        with pytest.raises(ValidationError):
            PaginationQuery(size=settings.max_page_size + 1)

    def test_size_at_maximum_is_accepted(self):
        assert PaginationQuery(size=settings.max_page_size).size == settings.max_page_size

    def test_zero_size_is_rejected(self):
        with pytest.raises(ValidationError):
            PaginationQuery(size=0)

    def test_direction_fields_default_to_none(self):
        query = PaginationQuery()

        assert query.cursor_direction is None
        assert query.sort_direction is None

    @pytest.mark.parametrize("field,value", [("cursor_direction", "up"), ("sort_direction", "sideways")])
    def test_direction_fields_accept_only_known_values(self, field, value):
        with pytest.raises(ValidationError):
            PaginationQuery(**{field: value})

    def test_body_url_is_carried_to_the_request(self):
        request = build_offset_request(
            PaginationQuery(), total_rows=45, base_url="/t", body_url="/t/body"
        )

        assert request.body_url == "/t/body"
        assert build_pagination_display(request).body_url == "/t/body"
