"""配置模块"""

from infrastructure.config.logging_config import setup_logging
from infrastructure.config.settings import TeamsSettings, get_settings

__all__ = ["TeamsSettings", "get_settings", "setup_logging"]
