"""Request Validation — method and gestation checks shared by both endpoints.

Invariants:
    - Only POST reaches validation; OPTIONS is answered before this module runs
    - weeks must be a number in (0, 42]; zero is rejected like a missing value
    - days and language are never rewritten here

Design Decisions:
    - Booleans are rejected even though bool is an int subclass: JSON true is not a week
    - Whole floats (20.0) and numeric strings ("20") are accepted and normalized to int;
      NaN and infinity fail the whole-number check
"""

from typing import Any

from prenatal_api.core.domain_types import MAX_WEEKS, MIN_WEEKS, GestationRequest
from prenatal_api.core.errors import InvalidWeeksError, MethodNotAllowedError

ALLOWED_METHOD = "POST"


def check_method(method: str) -> None:
    """Raise MethodNotAllowedError unless the request is a POST."""
    if method.upper() != ALLOWED_METHOD:
        raise MethodNotAllowedError(method)


def _coerce_weeks(value: Any) -> int:
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise InvalidWeeksError(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidWeeksError(value)
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidWeeksError(value)
        value = int(value)
    if not value or value < MIN_WEEKS or value > MAX_WEEKS:
        raise InvalidWeeksError(value)
    return value


def validate_content_request(body: Any) -> GestationRequest:
    """Validate a parsed JSON body. Non-object bodies count as empty."""
    if not isinstance(body, dict):
        body = {}
    weeks = _coerce_weeks(body.get("weeks"))
    return GestationRequest(
        weeks=weeks,
        days=body.get("days"),
        language=body.get("language"),
    )
