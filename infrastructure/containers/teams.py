"""
Teams 容器（TeamsContainer）

管理 Teams 客户端及其依赖：配置、httpx.Client、HttpTeamsClient。
"""

import httpx
from dependency_injector import containers, providers

from domain.teams.value_objects.client_options import ClientOptions
from infrastructure.config.settings import TeamsSettings, get_settings
from infrastructure.teams.teams_client import HttpTeamsClient


class TeamsContainer(containers.DeclarativeContainer):
    """Teams 容器 - 管理通知客户端"""

    # ============ 配置 ============

    # 配置（单例）
    settings: providers.Singleton[TeamsSettings] = providers.Singleton(get_settings)

    # 客户端配置
    client_options = providers.Factory(
        ClientOptions.from_settings,
        settings=settings,
    )

    # ============ 传输层 ============

    # httpx 客户端（单例，连接池在请求间复用）
    http_client: providers.Singleton[httpx.Client] = providers.Singleton(
        httpx.Client,
        timeout=settings.provided.timeout,
    )

    # ============ 客户端 ============

    # Teams 客户端（单例，构建后不可变，可并发使用）
    teams_client: providers.Singleton[HttpTeamsClient] = providers.Singleton(
        HttpTeamsClient,
        options=client_options,
        transport=http_client,
    )
