"""资源表单视图与表单处理器共享的类型定义.

统一描述资源标识、上下文与协议,方便在视图与处理器之间传递结构化数据.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from petclinic.types.structures import ContextMapping, PayloadMapping

ResourceIdentifier = int | str
ResourcePayload = PayloadMapping
ResourceContext = ContextMapping


@runtime_checkable
class SupportsResourceId(Protocol):
    """约束具备 id 属性的资源对象."""

    id: int | None


ResourceInstance = TypeVar("ResourceInstance", bound="SupportsResourceId")
