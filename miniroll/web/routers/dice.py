"""骰点 API 路由"""
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from ...config import Settings
from ...dice import (
    DiceDescriber,
    DiceParser,
    DiceRoller,
    RollSpec,
    SelectEnd,
    Selection,
    SelectMode,
    check_limits,
)
from ..dependencies import get_roller, get_settings

router = APIRouter()


# ===== Pydantic 模型 =====

class SelectionModel(BaseModel):
    """保留/弃置修饰"""
    mode: Literal["drop", "keep"]
    end: Literal["lowest", "highest"]
    count: int = Field(1, ge=1)


class RollSpecModel(BaseModel):
    """骰点参数"""
    count: int = Field(1, ge=1)
    sides: int = Field(..., ge=2)
    selection: Optional[SelectionModel] = None

    def to_spec(self) -> RollSpec:
        selection = None
        if self.selection is not None:
            selection = Selection(
                mode=SelectMode(self.selection.mode),
                end=SelectEnd(self.selection.end),
                count=self.selection.count,
            )
        return RollSpec(count=self.count, sides=self.sides, selection=selection)

    @classmethod
    def from_spec(cls, spec: RollSpec) -> "RollSpecModel":
        selection = None
        if spec.selection is not None:
            selection = SelectionModel(
                mode=spec.selection.mode.value,
                end=spec.selection.end.value,
                count=spec.selection.count,
            )
        return cls(count=spec.count, sides=spec.sides, selection=selection)


class RollResultModel(BaseModel):
    """单次骰点结果"""
    total: int
    kept: List[int]
    dropped: List[int]
    source: str
    short: str


class RollResponse(BaseModel):
    """骰点响应"""
    results: List[RollResultModel]


class DescribeResponse(BaseModel):
    """描述响应"""
    notation: str
    description: str
    short: str


# ===== API 端点 =====

def _roll(roller: DiceRoller, settings: Settings, value, times: int) -> dict:
    spec = DiceParser.resolve(value)
    check_limits(spec, times, settings.max_dice, settings.max_times)
    results = roller.roll_many(value, times)
    return {"results": [r.to_dict() for r in results]}


@router.get("/roll", response_model=RollResponse)
async def roll_notation(
    notation: str = Query(..., description="Dice notation, e.g. 4d6kH3"),
    times: int = Query(1, ge=1),
    roller: DiceRoller = Depends(get_roller),
    settings: Settings = Depends(get_settings),
):
    """按表达式骰点"""
    return _roll(roller, settings, notation, times)


@router.post("/roll", response_model=RollResponse)
async def roll_spec(
    body: RollSpecModel,
    times: int = Query(1, ge=1),
    roller: DiceRoller = Depends(get_roller),
    settings: Settings = Depends(get_settings),
):
    """按结构化参数骰点"""
    return _roll(roller, settings, body.to_spec(), times)


@router.get("/describe", response_model=DescribeResponse)
async def describe_notation(notation: str = Query(...)):
    """生成长描述和规范表达式"""
    spec = DiceParser.parse(notation)
    return {
        "notation": notation,
        "description": DiceDescriber.describe(spec),
        "short": DiceDescriber.describe_short(spec),
    }


@router.get("/parse", response_model=RollSpecModel)
async def parse_notation(notation: str = Query(...)):
    """解析表达式为结构化参数"""
    return RollSpecModel.from_spec(DiceParser.parse(notation))
