"""路由模块"""
from .dice import router as dice_router
from .health import router as health_router, set_start_time

__all__ = [
    "dice_router",
    "health_router",
    "set_start_time",
]
