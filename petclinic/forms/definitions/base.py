"""基础的资源表单定义模型.

这些定义会被视图、表单处理器以及模板共享,确保字段描述只有唯一来源.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from petclinic.types import ResourceContext, ResourceIdentifier, SupportsResourceId

if TYPE_CHECKING:
    from petclinic.types import ResourcePayload


class FieldComponent(str, Enum):
    """表单控件类型."""

    TEXT = "text"
    TEL = "tel"


@dataclass(slots=True)
class ResourceFormField:
    """单个字段的元数据.

    Attributes:
        name: HTTP 表单字段名.
        label: 展示标签.
        attribute: 表单对象上对应的属性名,用于回显.

    """

    name: str
    label: str
    attribute: str
    component: FieldComponent = FieldComponent.TEXT
    required: bool = False
    placeholder: str | None = None
    help_text: str | None = None


ResourceModelT = TypeVar("ResourceModelT", bound=SupportsResourceId)


class ResourceFormHandler(Protocol[ResourceModelT]):
    """表单处理器协议: 加载资源、保存提交、提供模板上下文."""

    def load(self, resource_id: ResourceIdentifier) -> ResourceModelT: ...

    def upsert(self, payload: ResourcePayload, resource: ResourceModelT | None = None) -> ResourceModelT: ...

    def build_context(
        self,
        *,
        resource: ResourceModelT | None,
        form: object | None = None,
        form_data: ResourcePayload | None = None,
    ) -> ResourceContext: ...


@dataclass(slots=True)
class ResourceFormDefinition(Generic[ResourceModelT]):
    """描述某个资源表单的基础配置.

    Attributes:
        name: 资源英文名(如 owner)
        template: 渲染所用的模板路径
        service_class: 表单处理器类型
        fields: 字段定义列表
        resource_id_arg: URL 规则中资源 ID 的参数名
        success_message: 保存成功后的提示语
        redirect_endpoint: 保存成功后跳转的端点

    """

    name: str
    template: str
    service_class: type[ResourceFormHandler[ResourceModelT]]
    fields: list[ResourceFormField] = field(default_factory=list)
    resource_id_arg: str = "resource_id"
    success_message: str = "保存成功"
    redirect_endpoint: str | None = None
