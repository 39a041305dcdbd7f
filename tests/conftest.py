"""测试公共夹具"""
import pytest
from loguru import logger


class ScriptedRng:
    """按预设顺序返回点数的随机源，记录每次调用参数"""

    def __init__(self, values):
        self._values = list(values)
        self.calls = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self._values.pop(0)


@pytest.fixture
def scripted_rng():
    """构造预设点数随机源"""
    return ScriptedRng


@pytest.fixture(autouse=True)
def reset_logging():
    """避免命令行测试配置的日志输出泄漏到其他测试"""
    yield
    logger.remove()
    logger.disable("miniroll")
