"""
Post-Processor Node
===================
Parse the model text and force the itinerary into the requested shape

Repair policy ("trust but truncate"):
- destination is overwritten with the normalized request value
- days are cut to days_count; short output stays short (no padding)
- each day's ``day`` and ``dateLabel`` are overwritten by position
- blocks are cut to MAX_BLOCKS_PER_DAY; block content is not inspected
- missing ``days`` / ``blocks`` become empty lists, non-object days become empty days
"""

import json
import logging
import math
from collections.abc import Sequence
from typing import Any

from itinerary_agent.errors import UpstreamFormatError
from itinerary_agent.state import MAX_BLOCKS_PER_DAY

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    # JSON has no NaN or Infinity literals
    raise ValueError(f"non-standard JSON constant {name}")


def _parse_finite_float(text: str) -> float:
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"number out of range: {text}")
    return number


def parse_itinerary_text(raw: str) -> dict[str, Any]:
    """
    解析模型返回的 JSON 文本

    Raises:
        UpstreamFormatError: 不是合法 JSON（包括 NaN / Infinity），或顶层不是对象
    """
    try:
        parsed = json.loads(
            raw, parse_constant=_reject_constant, parse_float=_parse_finite_float
        )
    except json.JSONDecodeError as e:
        logger.warning(f"Model returned invalid JSON ({e.msg}): {raw[:200]}")
        raise UpstreamFormatError(raw, f"invalid JSON: {e.msg}") from e
    except ValueError as e:
        logger.warning(f"Model returned invalid JSON ({e}): {raw[:200]}")
        raise UpstreamFormatError(raw, f"invalid JSON: {e}") from e

    if not isinstance(parsed, dict):
        logger.warning(f"Model returned a JSON {type(parsed).__name__}, expected object")
        raise UpstreamFormatError(raw, "top-level JSON value is not an object")

    return parsed


def _as_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, list) else []


def repair_itinerary(
    itinerary: dict[str, Any],
    destination: str,
    days_count: int,
    date_labels: Sequence[str],
) -> dict[str, Any]:
    """
    按请求参数修正行程结构

    Args:
        itinerary: 解析后的模型输出
        destination: 规范化后的目的地
        days_count: 请求的天数
        date_labels: 每天的日期标签（长度 >= days_count）

    Returns:
        新的行程 dict（不修改输入）
    """
    days = []
    for index, day in enumerate(_as_list(itinerary.get("days"))[:days_count]):
        day = day if isinstance(day, dict) else {}
        days.append(
            {
                **day,
                "day": index + 1,
                "dateLabel": date_labels[index],
                "blocks": _as_list(day.get("blocks"))[:MAX_BLOCKS_PER_DAY],
            }
        )

    if len(days) < days_count:
        logger.info(f"Model returned {len(days)} of {days_count} requested days")

    return {**itinerary, "destination": destination, "days": days}
