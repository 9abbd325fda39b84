"""Tests for the filters token codec."""

import base64
import json

from pyeza.services.filters import FilterCondition, decode_filters, encode_filters


def make_token(document) -> str:
    return base64.b64encode(json.dumps(document).encode("utf-8")).decode("ascii")


class TestEncodeFilters:

    def test_no_conditions_encode_to_empty_token(self):
        assert encode_filters([]) == ""

    def test_encodes_compact_json(self):
        token = encode_filters([FilterCondition(column="name", operator="equals", value="Acme")])

        decoded = base64.b64decode(token).decode("utf-8")
        assert decoded == '[{"column":"name","operator":"equals","value":"Acme","logic":"and"}]'

    def test_round_trip(self):
        conditions = [
            FilterCondition(column="name", operator="contains", value="acme"),
            FilterCondition(column="status", operator="is_empty", logic="or"),
            FilterCondition(column="city", operator="starts_with", value="Zürich"),
        ]

        assert decode_filters(encode_filters(conditions)) == conditions


class TestDecodeFilters:

    def test_empty_token(self):
        assert decode_filters("") == []

    def test_invalid_base64(self):
        assert decode_filters("not base64!!") == []

    def test_invalid_json(self):
        assert decode_filters(base64.b64encode(b"{not json").decode("ascii")) == []

    def test_non_list_document(self):
        assert decode_filters(make_token({"column": "name"})) == []

    def test_invalid_entries_are_skipped(self):
        token = make_token(
            [
                {"column": "name", "operator": "equals", "value": "Acme"},
                {"operator": "equals"},
                {"column": "status", "operator": "matches"},
                "name",
            ]
        )

        conditions = decode_filters(token)

        assert conditions == [FilterCondition(column="name", operator="equals", value="Acme")]
