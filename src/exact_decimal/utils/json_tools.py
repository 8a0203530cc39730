from __future__ import annotations

import json
from typing import Any

from exact_decimal.domain.decimal_value import Decimal


def json_default(obj: Any) -> Any:
    """`default=` hook for `json.dumps`: Decimals become their exact string form.

    Raises:
        TypeError: If $obj is not a Decimal (same contract as `json.JSONEncoder.default`).
    """
    if isinstance(obj, Decimal):
        return obj.to_json()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class DecimalJSONEncoder(json.JSONEncoder):
    """JSON encoder writing Decimals as strings, e.g. `{"price": Decimal('12.3')}` is written as `{"price": "12.3"}`."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Decimal):
            return obj.to_json()
        return super().default(obj)
