"""日志配置"""

import logging
from typing import Optional

from infrastructure.config.settings import TeamsSettings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(settings: Optional[TeamsSettings] = None) -> None:
    """
    按配置初始化根日志记录器

    Args:
        settings: 配置实例，默认使用全局配置
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
