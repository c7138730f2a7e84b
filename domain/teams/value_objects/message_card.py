"""MessageCard 值对象

Office 365 Connector Card 消息格式。仅作为数据载体，发送前的校验见
domain.teams.services.validator。
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

MESSAGE_CARD_TYPE = "MessageCard"
MESSAGE_CARD_CONTEXT = "https://schema.org/extensions"


@dataclass(frozen=True)
class MessageCardFact:
    """Section 中的键值对"""

    name: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class MessageCardSection:
    """MessageCard 分节

    Attributes:
        activity_title: 活动标题
        activity_subtitle: 活动副标题
        activity_image: 活动图片 URL
        activity_text: 活动正文
        text: 分节正文
        markdown: 是否按 Markdown 渲染
        facts: 键值对列表
    """

    activity_title: str = ""
    activity_subtitle: str = ""
    activity_image: str = ""
    activity_text: str = ""
    text: str = ""
    markdown: bool = True
    facts: Tuple[MessageCardFact, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"markdown": self.markdown}
        optional = {
            "activityTitle": self.activity_title,
            "activitySubtitle": self.activity_subtitle,
            "activityImage": self.activity_image,
            "activityText": self.activity_text,
            "text": self.text,
        }
        result.update({k: v for k, v in optional.items() if v})
        if self.facts:
            result["facts"] = [fact.to_dict() for fact in self.facts]
        return result


@dataclass(frozen=True)
class MessageCard:
    """Teams 消息卡片

    text 与 summary 至少需要一个非空，否则 Teams 返回
    400 "Summary or Text is required."，因此客户端在发送前拦截。

    Attributes:
        text: 正文
        summary: 摘要（通知中显示）
        title: 标题
        theme_color: 主题色（十六进制，如 "0076D7"）
        sections: 分节
        potential_action: 操作按钮，原样透传
    """

    text: str = ""
    summary: str = ""
    title: str = ""
    theme_color: str = ""
    sections: Tuple[MessageCardSection, ...] = ()
    potential_action: Tuple[Dict[str, Any], ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """转换为 JSON 可序列化字典

        Returns:
            Connector Card 格式的字典，空字段省略
        """
        result: Dict[str, Any] = {
            "@type": MESSAGE_CARD_TYPE,
            "@context": MESSAGE_CARD_CONTEXT,
        }
        optional = {
            "title": self.title,
            "text": self.text,
            "summary": self.summary,
            "themeColor": self.theme_color,
        }
        result.update({k: v for k, v in optional.items() if v})
        if self.sections:
            result["sections"] = [section.to_dict() for section in self.sections]
        if self.potential_action:
            result["potentialAction"] = [dict(action) for action in self.potential_action]
        return result
