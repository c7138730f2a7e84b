"""Teams 领域模块

向 Microsoft Teams incoming webhook 发送 MessageCard 的领域层，
包含值对象、校验规则、异常类型和客户端接口。
"""

from domain.teams.exceptions import (
    DecodeError,
    NotFoundError,
    RequestConstructionError,
    TeamsError,
    TooManyRequestsError,
    TransportError,
    UnexpectedStatusError,
    UserAccessDeniedError,
    ValidationError,
)
from domain.teams.value_objects import ClientOptions, MessageCard

__all__ = [
    "ClientOptions",
    "DecodeError",
    "MessageCard",
    "NotFoundError",
    "RequestConstructionError",
    "TeamsError",
    "TooManyRequestsError",
    "TransportError",
    "UnexpectedStatusError",
    "UserAccessDeniedError",
    "ValidationError",
]
