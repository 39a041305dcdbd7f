"""骰点描述单元测试"""
import pytest

from miniroll import describe, describe_short
from miniroll.dice import (
    DiceParser,
    DiceSyntaxError,
    RollSpec,
    SelectEnd,
    Selection,
    SelectMode,
)


# (表达式, 规范表达式, 长描述)
DESCRIPTIONS = [
    ("d10", "1d10", "roll 1 10-sided die"),
    ("1d20", "1d20", "roll 1 20-sided die"),
    ("1d%", "1d100", "roll 1 100-sided die"),
    ("15d2", "15d2", "roll 15 2-sided dice"),
    ("4d6dL", "4d6dL", "roll 4 6-sided dice and drop the lowest"),
    ("4d6kH3", "4d6kH3", "roll 4 6-sided dice and keep the highest 3"),
    ("2d20-H", "2d20dH", "roll 2 20-sided dice and drop the highest"),
    ("2d20-L", "2d20dL", "roll 2 20-sided dice and drop the lowest"),
    ("10d%", "10d100", "roll 10 100-sided dice"),
]


class TestDescribe:
    """测试长描述和规范表达式"""

    @pytest.mark.parametrize("notation, short, long", DESCRIPTIONS)
    def test_describe(self, notation, short, long):
        assert describe(notation) == long

    @pytest.mark.parametrize("notation, short, long", DESCRIPTIONS)
    def test_describe_short(self, notation, short, long):
        assert describe_short(notation) == short

    def test_select_count_one_omitted(self):
        """测试选取数量为 1 时省略"""
        assert describe("4d6kH1") == "roll 4 6-sided dice and keep the highest"
        assert describe_short("4d6kH1") == "4d6kH"

    def test_spec_input(self):
        spec = RollSpec(count=3, sides=8, selection=Selection(SelectMode.KEEP, SelectEnd.LOWEST, 2))
        assert describe(spec) == "roll 3 8-sided dice and keep the lowest 2"
        assert describe_short(spec) == "3d8kL2"

    def test_invalid_notation(self):
        with pytest.raises(DiceSyntaxError):
            describe("3d6x")
        with pytest.raises(DiceSyntaxError):
            describe_short("3d6x")

    def test_deterministic(self):
        assert describe("4d6kH3") == describe("4d6kH3")
        assert describe_short("2d20-H") == describe_short("2d20-H")


class TestRoundTrip:
    """测试规范表达式可被重新解析"""

    @pytest.mark.parametrize(
        "spec",
        [
            RollSpec(count=1, sides=2),
            RollSpec(count=12, sides=100),
            RollSpec(count=4, sides=6, selection=Selection(SelectMode.DROP, SelectEnd.LOWEST)),
            RollSpec(count=8, sides=10, selection=Selection(SelectMode.KEEP, SelectEnd.HIGHEST, 7)),
            RollSpec(count=2, sides=6, selection=Selection(SelectMode.KEEP, SelectEnd.LOWEST, 5)),
        ],
    )
    def test_round_trip(self, spec):
        assert DiceParser.parse(describe_short(spec)) == spec
