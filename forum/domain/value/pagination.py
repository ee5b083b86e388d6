"""Pagination window for top-level comment listings."""

import math
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(value: Any) -> int | None:
    """Parse the leading integer of a query value, None if there is none.

    Floats are truncated and strings keep their leading digits, so ``"2.5"``
    gives 2 and ``"12abc"`` gives 12.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


class Page(BaseModel):
    """A limit/offset window.

    Always holds a positive limit and a non-negative offset.
    """

    model_config = ConfigDict(frozen=True)

    limit: int = Field(gt=0)
    offset: int = Field(ge=0)

    @classmethod
    def coerce(
        cls,
        limit: Any = None,
        offset: Any = None,
        default_limit: int = 20,
        max_limit: int | None = None,
    ) -> "Page":
        """Build a page from untrusted client input.

        Numeric input is truncated to its leading integer. Missing,
        non-numeric or non-positive limits fall back to ``default_limit``;
        when ``max_limit`` is set, larger limits are capped to it. Missing,
        non-numeric or negative offsets become 0. Never raises.

        Args:
            limit: Raw limit (int, numeric string, or anything else)
            offset: Raw offset (int, numeric string, or anything else)
            default_limit: Limit used when the raw value is unusable
            max_limit: Largest limit handed to the store, None for no cap

        Returns:
            Normalized page
        """
        parsed_limit = _to_int(limit)
        if parsed_limit is None or parsed_limit <= 0:
            parsed_limit = default_limit
        if max_limit is not None:
            parsed_limit = min(parsed_limit, max_limit)

        parsed_offset = _to_int(offset)
        if parsed_offset is None or parsed_offset < 0:
            parsed_offset = 0

        return cls(limit=parsed_limit, offset=parsed_offset)
