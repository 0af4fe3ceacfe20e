"""
Normalizer Node - 请求校验与规范化
==================================
Turns the raw request payload into a TripRequest

职责：
- Coerce and trim destination / dates, fail fast on missing values
- Coerce travelers, budget and interests the way the web form sends them
- Compute the inclusive day count and one canonical label per day

Pure functions only; nothing here talks to the model.
"""

import logging
import math
from collections.abc import Mapping
from datetime import date, datetime, timedelta
from typing import Any

from itinerary_agent.errors import ValidationError
from itinerary_agent.state import DEFAULT_DAYS_COUNT, TripRequest

logger = logging.getLogger(__name__)


def parse_calendar_date(text: str) -> date | None:
    """
    解析 ISO 日期文本

    Accepts ``YYYY-MM-DD`` and full ISO datetimes (truncated to the date).

    Returns:
        date，无法解析时返回 None
    """
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def count_days_inclusive(start_date: str, end_date: str) -> int:
    """
    计算行程天数（包含首尾两天）

    Args:
        start_date: 开始日期文本
        end_date: 结束日期文本

    Returns:
        天数；任一日期无法解析时返回 DEFAULT_DAYS_COUNT，结束早于开始时返回 1

    Example:
        >>> count_days_inclusive("2024-01-01", "2024-01-04")
        4
    """
    start = parse_calendar_date(start_date)
    end = parse_calendar_date(end_date)
    if start is None or end is None:
        return DEFAULT_DAYS_COUNT
    return max(1, (end - start).days + 1)


def build_date_labels(start_date: str, days_count: int) -> list[str]:
    """
    生成每天的日期标签

    Returns:
        ``YYYY-MM-DD`` 列表；开始日期无法解析时为 ``Day 1``, ``Day 2``, ...
        超出 ``date.max`` 的日期同样使用 ``Day N``
    """
    start = parse_calendar_date(start_date)
    labels = []
    for index in range(days_count):
        label = f"Day {index + 1}"
        if start is not None:
            try:
                label = (start + timedelta(days=index)).isoformat()
            except OverflowError:
                start = None
        labels.append(label)
    return labels


def _js_string(value: Any) -> str:
    """str() with JSON spelling for booleans, null and integral floats"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def _coerce_text(value: Any) -> str:
    """Falsy values become the empty string"""
    if not value:
        return ""
    return _js_string(value).strip()


def _coerce_number(value: Any) -> int | float:
    """
    数值转换，非数值返回 NaN

    Integral values stay ints so they serialize without a trailing ``.0``.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int | float):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            number = float(text)
        except ValueError:
            return math.nan
        return int(number) if number.is_integer() else number
    return math.nan


def normalize_trip_request(payload: Any) -> TripRequest:
    """
    校验并规范化请求

    Validation order: destination first, then dates. Both checks happen before
    any external call is made.

    Args:
        payload: 原始请求体（通常是 dict，其他类型视为空请求）

    Returns:
        TripRequest，包含 days_count 和 date_labels

    Raises:
        ValidationError: 缺少目的地或日期
    """
    if not isinstance(payload, Mapping):
        payload = {}

    destination = _coerce_text(payload.get("destination"))
    start_date = _coerce_text(payload.get("startDate"))
    end_date = _coerce_text(payload.get("endDate"))

    if not destination:
        raise ValidationError("missing destination", "Destination is required")
    if not start_date or not end_date:
        raise ValidationError("missing dates", "Start and end date are required")

    travelers = payload.get("travelers")
    budget = payload.get("budget")
    interests = payload.get("interests")
    if not isinstance(interests, list | tuple):
        interests = []

    days_count = count_days_inclusive(start_date, end_date)
    date_labels = build_date_labels(start_date, days_count)

    logger.debug(f"Normalized trip: destination={destination}, days={days_count}")

    return TripRequest(
        destination=destination,
        start_date=start_date,
        end_date=end_date,
        travelers=_coerce_number(travelers) if travelers else 1,
        budget=None if budget is None or budget == "" else _coerce_number(budget),
        interests=[_js_string(item) for item in interests],
        days_count=days_count,
        date_labels=date_labels,
    )
