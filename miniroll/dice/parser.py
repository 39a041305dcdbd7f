"""骰点表达式解析器"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from loguru import logger

from .errors import DiceSyntaxError, InvalidRollError


class SelectMode(Enum):
    """保留 / 弃置"""
    DROP = "drop"
    KEEP = "keep"


class SelectEnd(Enum):
    """从排序后的哪一端选取"""
    LOWEST = "lowest"
    HIGHEST = "highest"


def _check_int(name: str, value, minimum: int) -> None:
    """必须是 int（bool 不算）且不小于 minimum"""
    if type(value) is not int:
        raise InvalidRollError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidRollError(f"{name} must be at least {minimum}, got {value}")


@dataclass(frozen=True)
class Selection:
    """保留/弃置修饰"""

    mode: SelectMode
    end: SelectEnd
    count: int = 1  # 选取的骰子数量

    def __post_init__(self):
        if not isinstance(self.mode, SelectMode):
            raise InvalidRollError(f"selection mode must be a SelectMode, got {self.mode!r}")
        if not isinstance(self.end, SelectEnd):
            raise InvalidRollError(f"selection end must be a SelectEnd, got {self.end!r}")
        _check_int("selection count", self.count, 1)


@dataclass(frozen=True, kw_only=True)
class RollSpec:
    """骰点参数"""

    count: int = 1  # 骰子数量
    sides: int  # 骰子面数
    selection: Optional[Selection] = None

    def __post_init__(self):
        _check_int("dice count", self.count, 1)
        _check_int("dice sides", self.sides, 2)
        if self.selection is not None and not isinstance(self.selection, Selection):
            raise InvalidRollError(f"selection must be a Selection, got {self.selection!r}")


RollInput = Union[str, RollSpec]


class DiceParser:
    """骰点表达式解析器"""

    # 首尾允许的空白，含 NBSP、全角空格、BOM 等 Unicode 空白
    WHITESPACE = r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]*"

    # 完整表达式: 4d6kH3, d%, 2d20-H
    NOTATION_PATTERN = re.compile(
        WHITESPACE
        + r"(?P<count>[1-9][0-9]*)?d(?P<sides>[2-9]|[1-9][0-9]+|%)"
        r"(?:[-dk][lh](?:[1-9][0-9]*)?)*"
        + WHITESPACE,
        re.IGNORECASE | re.ASCII,
    )
    # 单个选取子句: kH3, dL, -h
    SELECTOR_PATTERN = re.compile(
        r"(?P<mode>[-dk])(?P<end>[lh])(?P<count>[1-9][0-9]*)?",
        re.IGNORECASE | re.ASCII,
    )

    @classmethod
    def parse(cls, notation: str) -> RollSpec:
        """解析骰点表达式，不合法时抛出 DiceSyntaxError"""
        match = cls.NOTATION_PATTERN.fullmatch(notation)
        if match is None:
            logger.debug(f"PARSE_ERR | notation={notation!r}")
            raise DiceSyntaxError(notation)

        count_str, sides_str = match.group("count", "sides")
        count = int(count_str) if count_str else 1
        sides = 100 if sides_str == "%" else int(sides_str)

        # 多个选取子句时只有最后一个生效
        selection = None
        selectors = list(cls.SELECTOR_PATTERN.finditer(notation, match.end("sides")))
        if selectors:
            last = selectors[-1]
            mode = SelectMode.DROP if last.group("mode") in "-dD" else SelectMode.KEEP
            end = SelectEnd.LOWEST if last.group("end") in "lL" else SelectEnd.HIGHEST
            select_count = int(last.group("count")) if last.group("count") else 1
            selection = Selection(mode=mode, end=end, count=select_count)

        return RollSpec(count=count, sides=sides, selection=selection)

    @classmethod
    def resolve(cls, value: RollInput) -> RollSpec:
        """字符串先解析，RollSpec 原样返回"""
        if isinstance(value, str):
            return cls.parse(value)
        return value

    @classmethod
    def is_valid(cls, notation: str) -> bool:
        """检查表达式是否有效"""
        return cls.NOTATION_PATTERN.fullmatch(notation) is not None
