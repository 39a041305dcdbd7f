"""FastAPI 应用工厂"""
from typing import Optional

from fastapi import FastAPI

from .. import __version__
from ..config import Settings, settings as default_settings
from ..dice import DiceError, DiceRoller, DiceSyntaxError
from .middleware import (
    ErrorHandlerMiddleware,
    RequestLoggingMiddleware,
    dice_error_handler,
    dice_syntax_error_handler,
)


def create_app(
    roller: Optional[DiceRoller] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    创建 FastAPI 应用

    Args:
        roller: 骰点执行器（可选，不传则新建）
        settings: 应用配置（可选，不传则使用全局配置）

    Returns:
        配置好的 FastAPI 应用实例
    """
    settings = settings or default_settings

    app = FastAPI(
        title="miniroll",
        description="Dice notation parsing and rolling API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # 添加中间件
    app.add_middleware(ErrorHandlerMiddleware, debug=settings.log_level.upper() == "DEBUG")
    app.add_middleware(RequestLoggingMiddleware)

    # 子类优先匹配，语法错误走 400
    app.add_exception_handler(DiceSyntaxError, dice_syntax_error_handler)
    app.add_exception_handler(DiceError, dice_error_handler)

    # 存储到 app.state 供依赖注入使用
    app.state.roller = roller or DiceRoller()
    app.state.settings = settings

    from .routers import dice_router, health_router, set_start_time

    app.include_router(dice_router, prefix="/api/dice", tags=["dice"])
    app.include_router(health_router, prefix="/health", tags=["health"])

    set_start_time()
    return app
