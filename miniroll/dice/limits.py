"""对外接口的骰点数量限制"""
from .errors import LimitExceededError
from .parser import RollSpec


def check_limits(spec: RollSpec, times: int = 1, max_dice: int = 1000, max_times: int = 100) -> None:
    """超出限制时抛出 LimitExceededError"""
    if spec.count > max_dice:
        raise LimitExceededError(f"Too many dice: {spec.count} (max {max_dice})")
    if times < 1:
        raise LimitExceededError(f"times must be at least 1, got {times}")
    if times > max_times:
        raise LimitExceededError(f"Too many rolls: {times} (max {max_times})")
