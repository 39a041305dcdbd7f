"""日志配置模块

结构化日志格式、轮转和保留策略。
"""
import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger


# 控制台日志格式
DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level:<8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# 文件日志格式 - 纯文本
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level:<8} | "
    "{name}:{function}:{line} | "
    "{message}"
)


def setup_logging(
    level: str = "INFO",
    log_path: Optional[Path] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    enable_console: bool = True,
    enable_file: bool = True,
) -> None:
    """配置日志系统

    Args:
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_path: 日志文件目录，为空时不写文件
        rotation: 日志轮转策略 (如 "10 MB", "1 day")
        retention: 日志保留策略 (如 "7 days")
        enable_console: 是否启用控制台输出
        enable_file: 是否启用文件输出
    """
    logger.remove()
    # 包导入时默认禁用了本库日志
    logger.enable("miniroll")

    # 环境变量优先
    env_level = os.environ.get("LOG_LEVEL", level).upper()

    if enable_console:
        logger.add(
            sys.stderr,
            level=env_level,
            format=DEFAULT_FORMAT,
            colorize=True,
            backtrace=True,
            diagnose=False,
        )

    if enable_file and log_path:
        log_path = Path(log_path)
        log_path.mkdir(parents=True, exist_ok=True)

        # 全量日志 + ERROR 及以上单独一份
        for prefix, file_level in (("miniroll", "DEBUG"), ("error", "ERROR")):
            logger.add(
                log_path / f"{prefix}_{{time:YYYY-MM-DD}}.log",
                level=file_level,
                format=FILE_FORMAT,
                rotation=rotation,
                retention=retention,
                compression="zip",
                encoding="utf-8",
            )


def get_logger(name: Optional[str] = None):
    """获取日志记录器

    Args:
        name: 模块名称，用于日志标识
    """
    if name:
        return logger.bind(name=name)
    return logger
