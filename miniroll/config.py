"""配置管理模块"""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置，环境变量前缀 MINIROLL_"""

    model_config = SettingsConfigDict(
        env_prefix="MINIROLL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 日志配置
    log_level: str = "INFO"
    log_path: Optional[Path] = None
    log_rotation: str = "10 MB"
    log_retention: str = "7 days"

    # 骰点配置
    default_notation: str = "1d100"
    # 仅限制命令行和 Web 接口，库本身不限制
    max_dice: int = Field(1000, ge=1)
    max_times: int = Field(100, ge=1)

    # Web 服务配置
    web_host: str = "127.0.0.1"
    web_port: int = 8080


settings = Settings()
