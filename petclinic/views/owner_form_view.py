"""宠物主人表单视图."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from flask import request

from petclinic.constants import SuccessMessages
from petclinic.forms.definitions.owner import OWNER_FORM_DEFINITION
from petclinic.views.mixins.resource_forms import ResourceFormView

if TYPE_CHECKING:
    from petclinic.models.owner import Owner
else:
    Owner = Any


class OwnerFormView(ResourceFormView[Owner]):
    """统一处理宠物主人创建与编辑的视图.

    Attributes:
        form_definition: 宠物主人表单定义配置.

    """

    form_definition = OWNER_FORM_DEFINITION

    def get_success_message(self, instance: Owner) -> str:
        """获取成功消息.

        Args:
            instance: 宠物主人实例对象,当前未使用.

        Returns:
            成功消息字符串.

        """
        del instance
        if request.view_args and request.view_args.get("owner_id"):
            return SuccessMessages.OWNER_UPDATED
        return SuccessMessages.OWNER_CREATED
