"""
Filter Token Service

Encodes advanced-filter conditions into the opaque ``filters`` query
parameter (base64 of a compact JSON array) and decodes them back. The
browser-side filter builder produces the same encoding.
"""

import base64
import json
from typing import List, Literal

import structlog
from pydantic import BaseModel, ValidationError

logger = structlog.get_logger()

FilterOperator = Literal[
    "contains",
    "equals",
    "starts_with",
    "ends_with",
    "not_equals",
    "is_empty",
    "is_not_empty",
]


class FilterCondition(BaseModel):
    column: str
    operator: FilterOperator = "contains"
    value: str = ""
    logic: Literal["and", "or"] = "and"


def encode_filters(conditions: List[FilterCondition]) -> str:
    """Encode conditions to a filters token. No conditions encode to ""."""
    if not conditions:
        return ""
    payload = json.dumps(
        [condition.model_dump() for condition in conditions],
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_filters(token: str) -> List[FilterCondition]:
    """
    Decode a filters token into conditions.

    An unreadable token decodes to no conditions; entries that are not
    valid conditions are dropped.
    """
    if not token:
        return []

    try:
        document = json.loads(base64.b64decode(token, validate=True).decode("utf-8"))
    except ValueError as e:
        logger.warning("filters.decode_failed", error=str(e))
        return []

    if not isinstance(document, list):
        logger.warning("filters.decode_failed", error="filters document is not a list")
        return []

    conditions = []
    for entry in document:
        try:
            conditions.append(FilterCondition.model_validate(entry))
        except ValidationError as e:
            logger.debug("filters.condition_skipped", error=str(e))
    return conditions
