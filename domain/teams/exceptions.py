"""Teams 通知异常

发送失败时抛出的异常类型。调用方通过 isinstance / except 区分错误种类，
不依赖错误信息文本。
"""

from typing import Optional

from domain.common.exceptions import DomainException


class TeamsError(DomainException):
    """Teams 通知异常基类"""


# ============ 校验 ============


class ValidationError(TeamsError):
    """输入校验失败（不会发起网络请求）"""


class InvalidWebhookURLError(ValidationError):
    """Webhook URL 无法解析或前缀不匹配"""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(reason)


class InvalidMessageCardError(ValidationError):
    """MessageCard 缺少 text / summary"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"invalid message card: {reason}")


# ============ 请求构建 / 传输 ============


class RequestConstructionError(TeamsError):
    """请求体序列化或请求对象创建失败"""


class TransportError(TeamsError):
    """传输层未能完成请求（连接、TLS、DNS、超时）

    Attributes:
        method: HTTP 方法
        url: 请求地址
        timeout: 是否由超时引起
    """

    def __init__(self, method: str, url: str, cause: Exception, timeout: bool = False):
        self.method = method
        self.url = url
        self.timeout = timeout
        super().__init__(f"failed to make request [{method}:{url}]: {cause}")


# ============ 响应状态码 ============


class StatusCodeError(TeamsError):
    """非成功状态码"""

    default_message = "unexpected status code"

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or self.default_message)


class NotFoundError(StatusCodeError):
    """404"""

    default_message = "the requested resource not found"

    def __init__(self, status_code: int = 404):
        super().__init__(status_code)


class UserAccessDeniedError(StatusCodeError):
    """401 / 403"""

    default_message = "you do not have access to the requested resource"

    def __init__(self, status_code: int = 403):
        super().__init__(status_code)


class TooManyRequestsError(StatusCodeError):
    """429，调用方可据此退避"""

    default_message = "you have exceeded throttle"

    def __init__(self, status_code: int = 429):
        super().__init__(status_code)


class UnexpectedStatusError(StatusCodeError):
    """其他非成功状态码"""

    def __init__(self, status_code: int):
        super().__init__(
            status_code,
            f"failed to do request, {status_code} status code received",
        )


# ============ 响应解析 ============


class DecodeError(TeamsError):
    """响应体无法解析为目标类型

    Attributes:
        body: 原始响应体
        method: 原请求方法
        url: 原请求地址
    """

    def __init__(self, method: str, url: str, body: str, cause: Exception):
        self.method = method
        self.url = url
        self.body = body
        super().__init__(
            f"could not parse response body: {cause} [{method}:{url}] {body}"
        )


# 错误种类常量，比较时请使用 isinstance
ERR_NOT_FOUND = NotFoundError()
ERR_USER_ACCESS_DENIED = UserAccessDeniedError()
ERR_TOO_MANY_REQUESTS = TooManyRequestsError()
