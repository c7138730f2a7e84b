"""依赖注入容器"""

from infrastructure.containers.teams import TeamsContainer

__all__ = ["TeamsContainer"]
