"""Teams 通知接口"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TeamsAPI(Protocol):
    """Teams 通知客户端接口

    定义向 Webhook 发送 MessageCard 的契约。
    实现类负责校验、发送以及将状态码映射为 TeamsError。
    """

    def send(self, webhook_url: str, message: Any) -> None:
        """发送通知

        Args:
            webhook_url: Teams incoming webhook 地址
            message: MessageCard

        Raises:
            TeamsError: 校验、传输或状态码错误
        """
        ...
