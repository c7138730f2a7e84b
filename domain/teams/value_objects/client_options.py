"""客户端配置值对象"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException

if TYPE_CHECKING:
    from infrastructure.config.settings import TeamsSettings

DEFAULT_TIMEOUT: float = 30.0


@dataclass(frozen=True)
class ClientOptions(BaseValueObject):
    """
    Teams 客户端配置

    创建后不可变，同一客户端的所有请求共享。

    Attributes:
        timeout: 单次请求超时（秒），为 0 或 None 时使用默认 30 秒
        verbose: 是否记录完整的请求/响应内容
    """

    timeout: Optional[float] = DEFAULT_TIMEOUT
    verbose: bool = False

    def __post_init__(self) -> None:
        if not self.timeout:
            object.__setattr__(self, "timeout", DEFAULT_TIMEOUT)
        super().__post_init__()

    def validate(self) -> None:
        """验证超时配置"""
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
            raise InvalidValueObjectException(
                value_object_type="ClientOptions",
                value=self.timeout,
                reason="Timeout must be a number of seconds",
            )

        if self.timeout < 0:
            raise InvalidValueObjectException(
                value_object_type="ClientOptions",
                value=self.timeout,
                reason=f"Invalid timeout: {self.timeout}. Must not be negative",
            )

    @classmethod
    def from_settings(cls, settings: "TeamsSettings") -> "ClientOptions":
        """从 TeamsSettings 创建配置"""
        return cls(timeout=settings.timeout, verbose=settings.verbose)
