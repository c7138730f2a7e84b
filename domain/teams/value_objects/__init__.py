"""Teams 领域值对象模块"""

from domain.teams.value_objects.client_options import ClientOptions, DEFAULT_TIMEOUT
from domain.teams.value_objects.message_card import (
    MessageCard,
    MessageCardFact,
    MessageCardSection,
)

__all__ = [
    "ClientOptions",
    "DEFAULT_TIMEOUT",
    "MessageCard",
    "MessageCardFact",
    "MessageCardSection",
]
