"""Teams Webhook 基础设施实现"""

from infrastructure.teams.request_builder import CONTENT_TYPE, build_request
from infrastructure.teams.teams_client import HttpTeamsClient, new_client

__all__ = ["CONTENT_TYPE", "HttpTeamsClient", "build_request", "new_client"]
