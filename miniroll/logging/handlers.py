"""操作日志装饰器

记录命令行操作的参数、耗时和结果。
"""
import time
from functools import wraps
from typing import Any, Callable

from loguru import logger


def log_operation(name: str) -> Callable:
    """操作执行日志装饰器

    日志格式:
    - 开始: OP | op=xxx | args=xxx
    - 成功: OP_OK | op=xxx | duration=xxxms
    - 失败: OP_ERR | op=xxx | duration=xxxms | error=xxx

    Args:
        name: 操作名称
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start_time = time.perf_counter()
            logger.debug(f"OP | op={name} | args={args} {kwargs}")

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = (time.perf_counter() - start_time) * 1000
                logger.warning(
                    f"OP_ERR | op={name} | duration={duration:.2f}ms | "
                    f"error={type(e).__name__}: {e}"
                )
                raise

            duration = (time.perf_counter() - start_time) * 1000
            logger.debug(f"OP_OK | op={name} | duration={duration:.2f}ms")
            return result

        return wrapper
    return decorator
