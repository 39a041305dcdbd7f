"""骰点描述生成"""
from .parser import DiceParser, RollInput, SelectEnd, SelectMode


class DiceDescriber:
    """把骰点参数渲染为自然语言或规范表达式"""

    @staticmethod
    def describe(value: RollInput) -> str:
        """长描述: roll 4 6-sided dice and keep the highest 3"""
        spec = DiceParser.resolve(value)
        dice_form = "die" if spec.count == 1 else "dice"
        base = f"roll {spec.count} {spec.sides}-sided {dice_form}"
        if spec.selection is None:
            return base

        select = spec.selection
        # 只选一个骰子时省略数量
        which = select.end.value if select.count == 1 else f"{select.end.value} {select.count}"
        return f"{base} and {select.mode.value} the {which}"

    @staticmethod
    def describe_short(value: RollInput) -> str:
        """规范表达式，输出总能被 DiceParser.parse 解析"""
        spec = DiceParser.resolve(value)
        base = f"{spec.count}d{spec.sides}"
        if spec.selection is None:
            return base

        select = spec.selection
        mode = "d" if select.mode is SelectMode.DROP else "k"
        end = "L" if select.end is SelectEnd.LOWEST else "H"
        suffix = str(select.count) if select.count > 1 else ""
        return f"{base}{mode}{end}{suffix}"
