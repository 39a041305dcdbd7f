"""骰点执行器"""
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from loguru import logger

from .describer import DiceDescriber
from .errors import LimitExceededError
from .parser import DiceParser, RollInput, RollSpec, SelectEnd, SelectMode


@dataclass(kw_only=True)
class RollResult:
    """骰点结果"""

    total: int
    spec: RollSpec  # 本次使用的骰点参数
    kept: List[int] = field(default_factory=list)  # 计入总和的骰子，按掷出顺序
    dropped: List[int] = field(default_factory=list)  # 被弃置的骰子，按掷出顺序
    source: str = ""  # 产生本次结果的表达式

    def __str__(self) -> str:
        source = self.source.strip()
        # 单个骰子无弃置
        if len(self.kept) == 1 and not self.dropped:
            return f"{source} = {self.total}"

        kept_str = ", ".join(map(str, self.kept))
        if self.dropped:
            dropped_str = ", ".join(map(str, self.dropped))
            return f"{source} = [{kept_str}] (dropped {dropped_str}) = {self.total}"
        return f"{source} = [{kept_str}] = {self.total}"

    def to_dict(self) -> Dict[str, Any]:
        """转为可 JSON 序列化的字典"""
        return {
            "total": self.total,
            "kept": list(self.kept),
            "dropped": list(self.dropped),
            "source": self.source,
            "short": DiceDescriber.describe_short(self.spec),
        }


class DiceRoller:
    """骰点执行器"""

    def __init__(self, rng: Optional[random.Random] = None):
        # 任何带 randint(a, b) 的对象都可以，测试里用固定种子
        self.rng = rng if rng is not None else random.Random()

    def roll(self, value: RollInput) -> RollResult:
        """执行骰点并应用保留/弃置"""
        spec = DiceParser.resolve(value)
        return self._execute(spec, self._source(value))

    def roll_many(self, value: RollInput, times: int) -> List[RollResult]:
        """同一表达式连续骰多次"""
        if times < 1:
            raise LimitExceededError(f"times must be at least 1, got {times}")
        spec = DiceParser.resolve(value)
        source = self._source(value)
        return [self._execute(spec, source) for _ in range(times)]

    @staticmethod
    def _source(value: RollInput) -> str:
        """字符串输入原样作为来源，RollSpec 输入用规范表达式"""
        if isinstance(value, str):
            return value
        return DiceDescriber.describe_short(value)

    def _execute(self, spec: RollSpec, source: str) -> RollResult:
        rolls = [self.rng.randint(1, spec.sides) for _ in range(spec.count)]

        kept, dropped = rolls, []
        if spec.selection is not None:
            selected, unselected = self._select(rolls, spec)
            if spec.selection.mode is SelectMode.KEEP:
                kept, dropped = selected, unselected
            else:
                kept, dropped = unselected, selected

        # 弃置全部骰子时总和为 0
        total = sum(kept)

        logger.debug(
            f"ROLL | source={source.strip()} | kept={kept} | "
            f"dropped={dropped} | total={total}"
        )
        return RollResult(total=total, kept=kept, dropped=dropped, source=source, spec=spec)

    @staticmethod
    def _select(rolls: List[int], spec: RollSpec) -> tuple[List[int], List[int]]:
        """
        按排序结果选出骰子，返回 (选中, 未选中)，两者都保持掷出顺序
        选取数量超过骰子数时选中全部
        """
        select = spec.selection
        ordered = sorted(rolls)
        n = min(select.count, len(ordered))
        if select.end is SelectEnd.LOWEST:
            values = ordered[:n]
        else:
            values = ordered[len(ordered) - n:]

        # 点数可能重复，需要按位置逐个对应回原始骰子
        remaining = list(rolls)
        chosen = [False] * len(rolls)
        for value in values:
            index = remaining.index(value)
            remaining[index] = None
            chosen[index] = True

        selected = [v for v, c in zip(rolls, chosen) if c]
        rest = [v for v, c in zip(rolls, chosen) if not c]
        return selected, rest


# 全局实例
default_roller = DiceRoller()
