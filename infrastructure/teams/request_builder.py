"""Teams Webhook 请求构建"""

import json
import logging
from typing import Any, Optional

import httpx

from domain.teams.exceptions import RequestConstructionError

CONTENT_TYPE = "application/json;charset=utf-8"

_logger = logging.getLogger(__name__)


def build_request(
    method: str,
    url: str,
    payload: Any,
    *,
    timeout: float,
    verbose: bool = False,
    logger: Optional[logging.Logger] = None,
) -> httpx.Request:
    """构建 JSON 请求

    请求通过 httpx 的 timeout 扩展携带超时，发送时由传输层执行。

    Args:
        method: HTTP 方法
        url: 请求地址
        payload: 请求体，带 to_dict() 的对象或可直接 JSON 序列化的值；None 表示无请求体
        timeout: 超时时间（秒）
        verbose: 是否记录完整请求
        logger: 日志记录器（可选）

    Returns:
        httpx.Request

    Raises:
        RequestConstructionError: 序列化失败或 URL 无法构建请求
    """
    log = logger or _logger

    content: Optional[bytes] = None
    if payload is not None:
        try:
            body = payload.to_dict() if hasattr(payload, "to_dict") else payload
            content = json.dumps(body, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise RequestConstructionError(f"failed to marshal request body: {e}") from e

    try:
        request = httpx.Request(
            method,
            url,
            content=content,
            headers={"Content-Type": CONTENT_TYPE},
            extensions={"timeout": httpx.Timeout(timeout).as_dict()},
        )
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise RequestConstructionError(f"failed to create HTTP request: {e}") from e

    if verbose:
        log.info(dump_request(request))

    return request


def dump_request(request: httpx.Request) -> str:
    """渲染请求行、请求头与请求体"""
    target = request.url.raw_path.decode("ascii", errors="replace")
    lines = [f"{request.method} {target} HTTP/1.1"]
    lines.extend(f"{name}: {value}" for name, value in request.headers.items())
    body = request.content.decode("utf-8", errors="replace")
    return "\n".join(lines) + "\n\n" + body


def dump_response(response: httpx.Response) -> str:
    """渲染状态行、响应头与响应体"""
    lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}"]
    lines.extend(f"{name}: {value}" for name, value in response.headers.items())
    try:
        body = response.read().decode("utf-8", errors="replace")
    except (httpx.HTTPError, httpx.StreamError) as e:
        body = f"<body unavailable: {e}>"
    return "\n".join(lines) + "\n\n" + body
