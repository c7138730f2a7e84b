"""
Teams 客户端配置管理

使用 pydantic-settings 从环境变量（TEAMS_ 前缀）和 .env 文件读取配置
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class TeamsSettings(BaseSettings):
    """
    Teams 客户端配置类

    自动从环境变量和 .env 文件读取配置，例如 TEAMS_TIMEOUT=10
    """

    # ========== 请求配置 ==========
    timeout: float = 30.0
    verbose: bool = False

    # ========== 日志配置 ==========
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TEAMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 忽略未定义的环境变量
    )


# 全局配置实例（单例）
_settings: TeamsSettings | None = None


def get_settings() -> TeamsSettings:
    """
    获取配置实例（单例模式）

    Returns:
        TeamsSettings 实例
    """
    global _settings
    if _settings is None:
        _settings = TeamsSettings()
    return _settings
