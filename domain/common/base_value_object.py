"""值对象基类"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class BaseValueObject(ABC):
    """值对象基类

    子类为不可变 dataclass，创建后自动调用 validate() 校验。
    """

    def __post_init__(self) -> None:
        self.validate()

    @abstractmethod
    def validate(self) -> None:
        """校验值对象，不合法时抛出 InvalidValueObjectException"""
        ...
