"""
API Request/Response Schemas
============================
Pydantic 模型定义

The itinerary route reads the raw JSON body itself so coercion and validation
messages stay under the normalizer's control; ItineraryRequest documents the
accepted body in OpenAPI.
"""

from typing import Any

from pydantic import BaseModel, Field

# ===== Itinerary API =====


class ItineraryRequest(BaseModel):
    """行程请求模型（仅用于文档）"""

    destination: str = Field(description="目的地")
    startDate: str = Field(description="开始日期 YYYY-MM-DD")
    endDate: str = Field(description="结束日期 YYYY-MM-DD")
    travelers: int | None = Field(default=1, description="出行人数")
    budget: float | str | None = Field(default=None, description="总预算，空字符串表示未设置")
    interests: list[str] = Field(default_factory=list, description="兴趣标签")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "destination": "Lisbon",
                    "startDate": "2024-05-01",
                    "endDate": "2024-05-03",
                    "travelers": 2,
                    "budget": 1500,
                    "interests": ["Food", "History"],
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """错误响应模型"""

    error: str = Field(description="错误信息")
    raw: str | None = Field(default=None, description="模型原始输出（仅 JSON 解析失败时）")


# ===== Health API =====


class HealthResponse(BaseModel):
    """Health 响应模型"""

    status: str = Field(default="healthy", description="服务状态")
    version: str = Field(default="1.0.0", description="API 版本")


def request_body_openapi() -> dict[str, Any]:
    """OpenAPI requestBody for routes that read the raw body"""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ItineraryRequest.model_json_schema()}},
        }
    }
