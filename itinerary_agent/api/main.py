"""
Itinerary Agent API - FastAPI 入口
==================================
提供 RESTful API 接口

Endpoints:
- GET /health - 健康检查
- POST /api/itinerary - 行程生成接口

启动方式:
    uvicorn itinerary_agent.api.main:app --reload --port 8000
"""

import logging
import os
import sys
from contextlib import asynccontextmanager
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from itinerary_agent import __version__
from itinerary_agent.api.routers import itinerary
from itinerary_agent.api.schemas import HealthResponse
from itinerary_agent.llm import TextGenerator

# 加载环境变量
load_dotenv()

# 配置日志输出到 stderr
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(name)s] %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    """应用生命周期管理"""
    logger.info("Itinerary Agent API starting...")
    if getattr(app.state, "text_generator", None) is None:
        # 默认生成器在首次请求时创建（缺少 API Key 不阻止启动）
        logger.info("No text generator injected; the default will be created on first request")
    yield
    logger.info("Itinerary Agent API shutting down...")


def create_app(text_generator: TextGenerator | None = None) -> FastAPI:
    """
    创建 FastAPI 应用

    Args:
        text_generator: 注入的文本生成器（测试时传入 fake；None 时按环境变量创建默认生成器）

    Returns:
        FastAPI 实例
    """
    app = FastAPI(
        title="Itinerary Agent API",
        description="根据目的地、日期、预算和兴趣生成结构化多日行程",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.text_generator = text_generator

    # CORS 中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # 生产环境应限制域名
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health_check() -> HealthResponse:
        """
        健康检查接口

        Returns:
            服务状态和版本信息
        """
        return HealthResponse(status="healthy", version=__version__)

    app.include_router(itinerary.router, prefix="/api", tags=["itinerary"])

    return app


app = create_app()


# ===== 主入口 =====

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "itinerary_agent.api.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=True,
    )
