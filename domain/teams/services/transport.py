"""传输层接口"""

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class Transport(Protocol):
    """HTTP 传输接口

    接收已构建的请求，返回响应或抛出 httpx.RequestError。
    httpx.Client 直接满足该接口；测试中可使用 httpx.MockTransport。
    """

    def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        """发送请求

        Args:
            request: 已构建的 HTTP 请求
            stream: 为 True 时不预读响应体，由调用方迭代读取并关闭

        Returns:
            HTTP 响应
        """
        ...
