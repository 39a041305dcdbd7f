"""依赖注入模块"""
from fastapi import HTTPException, Request

from ..config import Settings
from ..dice import DiceRoller


def get_roller(request: Request) -> DiceRoller:
    """获取骰点执行器"""
    roller = getattr(request.app.state, "roller", None)
    if roller is None:
        raise HTTPException(status_code=500, detail="Roller not initialized")
    return roller


def get_settings(request: Request) -> Settings:
    """获取应用配置"""
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        raise HTTPException(status_code=500, detail="Settings not initialized")
    return settings
