"""骰点异常"""


class DiceError(ValueError):
    """骰点模块异常基类"""


class DiceSyntaxError(DiceError):
    """骰点表达式不符合语法"""

    def __init__(self, notation: str):
        self.notation = notation
        super().__init__(f'Failed to parse dice notation "{notation}"')


class InvalidRollError(DiceError):
    """直接构造的骰点参数不合法，如 count=0 或 sides=1"""


class LimitExceededError(DiceError):
    """超出命令行 / Web 接口允许的骰子数量或次数"""
