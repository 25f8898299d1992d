# facet_counts/utils/formatters.py
import math
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Union
import pytz


def to_number(value: Any) -> Optional[Union[int, float]]:
    """Normalise a database numeric (Decimal, int, float) to int or float; NaN and Infinity become None"""
    if value is None:
        return None
    if isinstance(value, Decimal):
        if not value.is_finite():
            return None
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def to_id(value: Any) -> Optional[str]:
    """Identifiers may come back as UUID objects; the API speaks strings"""
    if value is None:
        return None
    return str(value)


def utc_now() -> datetime:
    """Timezone-aware current instant used as the item expiry reference"""
    return datetime.now(pytz.utc)
