"""HTTP Teams 客户端实现"""

import logging
import time
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from domain.teams.exceptions import (
    DecodeError,
    NotFoundError,
    StatusCodeError,
    TooManyRequestsError,
    TransportError,
    UnexpectedStatusError,
    UserAccessDeniedError,
)
from domain.teams.services.transport import Transport
from domain.teams.services.validator import is_valid_input
from domain.teams.value_objects.client_options import ClientOptions
from infrastructure.teams.request_builder import build_request, dump_response

T = TypeVar("T")

SUCCESS_STATUS_CODES = frozenset({200, 201, 204})

STATUS_CODE_ERRORS: Dict[int, Type[StatusCodeError]] = {
    404: NotFoundError,
    401: UserAccessDeniedError,
    403: UserAccessDeniedError,
    429: TooManyRequestsError,
}


class HttpTeamsClient:
    """HTTP Teams 客户端实现

    使用 httpx 向 Teams incoming webhook 发送 MessageCard。每次调用只发送一次，
    不做重试；非成功状态码映射为对应的 TeamsError 子类。

    未注入 transport 时内部创建 httpx.Client，并在 close() 时关闭；
    注入的 transport 由调用方管理。

    Attributes:
        options: 客户端配置（只读）
    """

    def __init__(
        self,
        options: Optional[ClientOptions] = None,
        transport: Optional[Transport] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化客户端

        Args:
            options: 客户端配置，默认超时 30 秒、关闭详细日志
            transport: 传输层实现（可选），如 httpx.Client
            logger: 日志记录器（可选）
        """
        self._options = options or ClientOptions()
        self._http_client: Optional[httpx.Client] = None
        if transport is None:
            self._http_client = httpx.Client(timeout=self._options.timeout)
            transport = self._http_client
        self._transport: Transport = transport
        self._logger = logger or logging.getLogger(__name__)

    @property
    def options(self) -> ClientOptions:
        return self._options

    def send(self, webhook_url: str, message: Any) -> None:
        """发送 MessageCard 到 Teams Webhook

        校验失败时直接抛出，不发起网络请求。

        Args:
            webhook_url: Teams incoming webhook 地址
            message: MessageCard

        Raises:
            ValidationError: URL 或消息校验失败
            RequestConstructionError: 请求构建失败
            TransportError: 网络错误或超时
            StatusCodeError: 非成功状态码
        """
        valid, error = is_valid_input(message, webhook_url)
        if not valid:
            raise error

        request = self.new_request("POST", webhook_url, message)

        self._logger.debug(f"Sending message card to {request.url.host}")
        self.do_request(request)

    def new_request(self, method: str, url: str, payload: Any) -> httpx.Request:
        """按客户端配置构建请求"""
        return build_request(
            method,
            url,
            payload,
            timeout=self._options.timeout,
            verbose=self._options.verbose,
            logger=self._logger,
        )

    def do(self, request: httpx.Request) -> httpx.Response:
        """发送请求并按状态码分类

        整个调用（连接、发送、读取响应头与响应体）受 options.timeout 总时限约束。
        响应体在时限内读入内存，返回的响应已缓冲，可重复读取。

        200 / 201 / 204 返回响应，调用方负责关闭；其余状态码关闭响应后抛出异常。

        Args:
            request: 已构建的请求

        Returns:
            成功的响应

        Raises:
            TransportError: 传输层失败或超过总时限
            StatusCodeError: 非成功状态码
        """
        method, url = request.method, str(request.url)
        deadline = time.monotonic() + self._options.timeout
        try:
            response = self._transport.send(request, stream=True)
        except httpx.TimeoutException as e:
            raise TransportError(method, url, e, timeout=True) from e
        except httpx.RequestError as e:
            raise TransportError(method, url, e) from e

        response = self._read_within_deadline(request, response, deadline)

        if self._options.verbose:
            self._logger.info(dump_response(response))

        status_code = response.status_code
        if status_code in SUCCESS_STATUS_CODES:
            return response

        self._close(response)

        error_type = STATUS_CODE_ERRORS.get(status_code)
        if error_type is not None:
            raise error_type(status_code)
        raise UnexpectedStatusError(status_code)

    def do_request(self, request: httpx.Request, result_type: Optional[Type[T]] = None) -> Optional[T]:
        """发送请求，可选地将响应体解析为 result_type

        无论成功与否，响应都会在返回前关闭。

        Args:
            request: 已构建的请求
            result_type: 解析目标类型（dict、pydantic 模型、dataclass 等），None 表示不解析

        Returns:
            解析结果；未指定 result_type 或响应体为空时返回 None

        Raises:
            TransportError: 传输层失败
            StatusCodeError: 非成功状态码
            DecodeError: 响应体无法解析
        """
        response = self.do(request)
        try:
            if result_type is None:
                return None

            body = response.content

            if not body:
                return None

            try:
                return TypeAdapter(result_type).validate_json(body)
            except (PydanticValidationError, ValueError) as e:
                raise DecodeError(
                    request.method,
                    str(request.url),
                    body.decode("utf-8", errors="replace"),
                    e,
                ) from e
        finally:
            self._close(response)

    def close(self) -> None:
        """关闭内部创建的 httpx.Client"""
        if self._http_client is not None:
            self._http_client.close()

    def __enter__(self) -> "HttpTeamsClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _read_within_deadline(
        self, request: httpx.Request, response: httpx.Response, deadline: float
    ) -> httpx.Response:
        """在截止时间前读完流式响应体，返回已缓冲的响应；流式响应总会被关闭"""
        method, url = request.method, str(request.url)
        chunks = []
        try:
            if time.monotonic() >= deadline:
                raise httpx.ReadTimeout("deadline exceeded while awaiting headers", request=request)
            for chunk in response.iter_bytes():
                chunks.append(chunk)
                if time.monotonic() >= deadline:
                    raise httpx.ReadTimeout("deadline exceeded while reading body", request=request)
        except httpx.TimeoutException as e:
            raise TransportError(method, url, e, timeout=True) from e
        except httpx.RequestError as e:
            raise TransportError(method, url, e) from e
        finally:
            self._close(response)

        # 缓冲的是解码后的响应体
        headers = response.headers.copy()
        headers.pop("Content-Encoding", None)
        return httpx.Response(
            response.status_code,
            headers=headers,
            content=b"".join(chunks),
            request=request,
            extensions=response.extensions,
        )

    def _close(self, response: httpx.Response) -> None:
        try:
            response.close()
        except Exception as e:
            self._logger.warning(f"Error: error in closing response body, {e}")


def new_client(options: Optional[ClientOptions] = None) -> HttpTeamsClient:
    """创建使用默认 httpx.Client 的 Teams 客户端"""
    return HttpTeamsClient(options=options or ClientOptions())
