"""
Itinerary API Router
====================
行程生成接口

POST /api/itinerary - 生成行程（JSON，或 ?format=markdown 返回 Markdown）
"""

import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from itinerary_agent.api.schemas import ErrorResponse, request_body_openapi
from itinerary_agent.errors import ItineraryError
from itinerary_agent.llm import TextGenerator, create_itinerary_generator
from itinerary_agent.nodes.normalizer import normalize_trip_request
from itinerary_agent.pipeline import generate_itinerary
from itinerary_agent.state import Itinerary
from itinerary_agent.utils.render import render_itinerary_markdown

logger = logging.getLogger(__name__)

router = APIRouter()


def get_text_generator(request: Request) -> TextGenerator:
    """
    获取当前应用的文本生成器

    create_app() 注入的实例优先；未注入时首次请求创建默认生成器并挂到 app.state。

    Raises:
        ValueError: 默认生成器缺少 API Key
    """
    generator = getattr(request.app.state, "text_generator", None)
    if generator is None:
        generator = create_itinerary_generator()
        request.app.state.text_generator = generator
    return generator


@router.post(
    "/itinerary",
    response_model=Itinerary,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra=request_body_openapi(),
)
async def create_itinerary(
    request: Request,
    output_format: str = Query(
        default="json",
        alias="format",
        description="markdown 返回 Markdown，其他值一律返回 JSON",
    ),
) -> Response:
    """
    行程生成接口

    处理流程：
    1. 读取原始请求体
    2. 校验并规范化（失败返回 400，不调用模型）
    3. 调用模型生成行程
    4. 解析并修正（天数、日期标签、每天最多 3 个时间段）

    Returns:
        修正后的行程；错误时返回 {"error": ...}
    """
    try:
        payload = await request.json()
        trip = normalize_trip_request(payload)
        generator = get_text_generator(request)
        itinerary = await generate_itinerary(trip, generator)

        if output_format == "markdown":
            return PlainTextResponse(
                render_itinerary_markdown(itinerary), media_type="text/markdown"
            )
        return JSONResponse(content=itinerary)

    except ItineraryError as e:
        logger.warning(f"Itinerary request failed ({e.status_code}): {e}")
        return JSONResponse(status_code=e.status_code, content=e.to_payload())
    except Exception:
        logger.exception("Itinerary API error")
        return JSONResponse(status_code=500, content=ItineraryError().to_payload())
