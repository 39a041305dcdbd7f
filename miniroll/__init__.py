"""miniroll - 骰点表达式解析与执行"""
from loguru import logger

from .dice import (
    DiceError,
    DiceSyntaxError,
    InvalidRollError,
    RollResult,
    RollSpec,
    SelectEnd,
    Selection,
    SelectMode,
    describe,
    describe_short,
    parse,
    roll,
)

__version__ = "1.0.0"

# 作为库使用时默认静默，setup_logging 会重新启用
logger.disable("miniroll")

__all__ = [
    "parse", "roll", "describe", "describe_short",
    "RollSpec", "Selection", "SelectMode", "SelectEnd", "RollResult",
    "DiceError", "DiceSyntaxError", "InvalidRollError",
]
