"""Teams 领域服务"""

from domain.teams.services.teams_api import TeamsAPI
from domain.teams.services.transport import Transport
from domain.teams.services.validator import (
    WEBHOOK_URL_OFFICE365_PREFIX,
    WEBHOOK_URL_OFFICE_COM_PREFIX,
    is_valid_input,
    is_valid_message_card,
    is_valid_webhook_url,
)

__all__ = [
    "TeamsAPI",
    "Transport",
    "WEBHOOK_URL_OFFICE365_PREFIX",
    "WEBHOOK_URL_OFFICE_COM_PREFIX",
    "is_valid_input",
    "is_valid_message_card",
    "is_valid_webhook_url",
]
