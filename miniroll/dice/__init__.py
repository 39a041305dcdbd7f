"""骰点模块"""
from .describer import DiceDescriber
from .errors import DiceError, DiceSyntaxError, InvalidRollError, LimitExceededError
from .limits import check_limits
from .parser import DiceParser, RollInput, RollSpec, SelectEnd, Selection, SelectMode
from .roller import DiceRoller, RollResult, default_roller

# 对外的四个操作
parse = DiceParser.parse
roll = default_roller.roll
describe = DiceDescriber.describe
describe_short = DiceDescriber.describe_short

__all__ = [
    "parse", "roll", "describe", "describe_short",
    "DiceParser", "DiceRoller", "DiceDescriber", "default_roller",
    "RollSpec", "Selection", "SelectMode", "SelectEnd", "RollInput", "RollResult",
    "DiceError", "DiceSyntaxError", "InvalidRollError", "LimitExceededError",
    "check_limits",
]
