"""Webhook URL 与 MessageCard 校验

纯函数，无 I/O。每个检查返回 (是否合法, 错误)，合法时错误为 None。
"""

from typing import Any, Optional, Tuple
from urllib.parse import urlsplit

from domain.teams.exceptions import (
    InvalidMessageCardError,
    InvalidWebhookURLError,
    ValidationError,
)

# Teams incoming webhook 的已知地址前缀
WEBHOOK_URL_OFFICE_COM_PREFIX = "https://outlook.office.com"
WEBHOOK_URL_OFFICE365_PREFIX = "https://outlook.office365.com"

KNOWN_WEBHOOK_URL_PREFIXES: Tuple[str, ...] = (
    WEBHOOK_URL_OFFICE_COM_PREFIX,
    WEBHOOK_URL_OFFICE365_PREFIX,
)


def is_valid_input(message: Any, webhook_url: str) -> Tuple[bool, Optional[ValidationError]]:
    """组合校验：先 URL，后 MessageCard

    URL 不合法时不再检查消息内容。

    Args:
        message: MessageCard 或带 text / summary 的载荷
        webhook_url: Webhook 地址

    Returns:
        (是否合法, 第一个校验错误)
    """
    valid, error = is_valid_webhook_url(webhook_url)
    if not valid:
        return False, error

    valid, error = is_valid_message_card(message)
    if not valid:
        return False, error

    return True, None


def is_valid_webhook_url(webhook_url: str) -> Tuple[bool, Optional[InvalidWebhookURLError]]:
    """检查 Webhook URL 是否以已知前缀开头

    前缀比较区分大小写，不做尾部斜杠归一化。前缀不匹配时再解析 URL，
    解析失败与前缀不匹配返回不同的错误信息。

    Args:
        webhook_url: Webhook 地址

    Returns:
        (是否合法, InvalidWebhookURLError)
    """
    if webhook_url.startswith(KNOWN_WEBHOOK_URL_PREFIXES):
        return True, None

    try:
        if any(ord(c) < 0x20 or c == "\x7f" for c in webhook_url):
            raise ValueError("invalid control character in URL")
        if webhook_url.startswith(":"):
            raise ValueError("missing protocol scheme")
        parts = urlsplit(webhook_url)
        if parts.scheme in ("http", "https") and not parts.netloc:
            raise ValueError("missing host")
    except ValueError as e:
        return False, InvalidWebhookURLError(
            url=webhook_url,
            reason=f"unable to parse webhook URL {webhook_url!r}: {e}",
        )

    user_provided_prefix = f"{parts.scheme}://{parts.netloc}"
    return False, InvalidWebhookURLError(
        url=webhook_url,
        reason=(
            "webhook URL does not contain expected prefix; "
            f"got {user_provided_prefix!r}, expected one of "
            f"{WEBHOOK_URL_OFFICE_COM_PREFIX!r} or {WEBHOOK_URL_OFFICE365_PREFIX!r}"
        ),
    )


def is_valid_message_card(message: Any) -> Tuple[bool, Optional[InvalidMessageCardError]]:
    """检查 text 与 summary 至少一个非空

    其余字段（title、theme_color、sections 等）不做校验。

    Args:
        message: MessageCard 或带 text / summary 键的字典

    Returns:
        (是否合法, InvalidMessageCardError)
    """
    if not _field(message, "text") and not _field(message, "summary"):
        # Teams 会返回 400 Bad Request: Summary or Text is required.
        return False, InvalidMessageCardError("summary or text field is required")

    return True, None


def _field(message: Any, name: str) -> Any:
    if isinstance(message, dict):
        return message.get(name)
    return getattr(message, name, None)
