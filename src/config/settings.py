"""配置管理模块 - 使用 Pydantic

集中管理所有配置项，支持环境变量、.env 文件和配置验证。
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jokes.base import DEFAULT_USER_AGENT

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_prefix="JOKECLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 日志级别
    log_level: str = Field(default="WARNING", description="日志级别")

    # 交互模式（测试时关闭）
    interactive: bool = Field(
        default=True, description="未指定子命令时是否进入交互模式"
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """确保日志级别合法"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


class HttpConfig(BaseSettings):
    """HTTP 配置"""

    model_config = SettingsConfigDict(
        env_prefix="JOKECLI_HTTP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 客户端标识
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT, min_length=1, description="User-Agent 请求头"
    )

    # 请求超时（秒），不设置则不超时
    timeout: Optional[float] = Field(default=None, gt=0, description="请求超时（秒）")

    @field_validator("user_agent", mode="after")
    @classmethod
    def validate_user_agent(cls, v: str) -> str:
        """去除首尾空白，拒绝空白标识"""
        v = v.strip()
        if not v:
            raise ValueError("User-Agent must not be blank")
        return v


class Config(BaseSettings):
    """全局配置"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    app: AppConfig = Field(default_factory=AppConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
