#!/usr/bin/env python3
"""
幼儿启蒙学习乐园 - FastAPI 主应用入口
Description: 提供字母、数字、形状的课程内容与测验，记录儿童学习进度和活动，供家长看板汇总查看
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from kidlearning.config.settings import settings
from kidlearning.utils.logger import setup_logging
from kidlearning.utils.database import init_db, check_db_connection
from kidlearning.utils.exceptions import KidLearningError
from kidlearning.utils.helpers import format_timestamp

# 设置日志
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    应用生命周期管理
    - 启动时初始化数据库和默认账号
    """
    logger.info("初始化学习应用...")

    try:
        init_db()
        logger.info("数据库初始化完成")
    except Exception as e:
        logger.error(f"应用启动失败: {e}")
        raise

    logger.info("学习应用启动完成")

    yield  # 应用运行期间

    logger.info("学习应用已关闭")

def create_application() -> FastAPI:
    """创建并配置FastAPI应用实例"""

    app = FastAPI(
        title=settings.APP_NAME,
        description="儿童字母、数字、形状启蒙课程与测验，学习进度跟踪和家长看板",
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    # 配置CORS中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 全局异常处理
    @app.exception_handler(KidLearningError)
    async def business_exception_handler(request: Request, exc: KidLearningError):
        logger.info(f"业务异常 {exc.status_code}: {exc.message} ({request.url.path})")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"error": "请求参数校验失败", "details": jsonable_encoder(exc.errors())}
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request, exc):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail}
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request, exc):
        logger.error(f"未处理的异常: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "内部服务器错误"}
        )

    return app

# 创建应用实例
app = create_application()

# 导入并包含路由
from kidlearning.api.routes import users, content, quiz, progress, activities

# 注册API路由
app.include_router(users.router, prefix="/api/v1/users", tags=["用户管理"])
app.include_router(content.router, prefix="/api/v1/content", tags=["学习内容"])
app.include_router(quiz.router, prefix="/api/v1/quiz", tags=["测验"])
app.include_router(progress.router, prefix="/api/v1/progress", tags=["学习进度"])
app.include_router(activities.router, prefix="/api/v1/activities", tags=["学习活动"])

# 健康检查端点
@app.get("/")
async def root():
    """根端点 - 服务状态检查"""
    return {
        "status": "running",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": format_timestamp()
    }

@app.get("/health")
async def health_check():
    """健康检查端点"""
    db_status = check_db_connection()

    return {
        "status": "healthy" if db_status else "unhealthy",
        "database": "connected" if db_status else "disconnected",
        "timestamp": format_timestamp()
    }

if __name__ == "__main__":
    """开发环境直接运行"""
    uvicorn.run(
        "kidlearning.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # 开发模式热重载
        log_level="info",
    )
