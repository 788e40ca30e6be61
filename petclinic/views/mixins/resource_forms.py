"""通用资源表单视图.

集成 GET/POST 逻辑,依赖 ResourceFormDefinition 与 ResourceFormHandler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar, cast

from flask import (
    Request,
    flash,
    redirect,
    render_template,
    request,
    url_for,
)
from flask.views import MethodView

from petclinic.constants import FlashCategory
from petclinic.errors import AppError, FormValidationError
from petclinic.infra.route_safety import log_with_context, safe_route_call
from petclinic.types import ResourcePayload, SupportsResourceId, TemplateContext

if TYPE_CHECKING:
    from flask.typing import ResponseReturnValue

    from petclinic.forms.definitions import ResourceFormDefinition, ResourceFormHandler

ResourceModelT = TypeVar("ResourceModelT", bound=SupportsResourceId)


class ResourceFormView(MethodView, Generic[ResourceModelT]):
    """通用 GET/POST 视图,子类只需设置 form_definition.

    GET 渲染表单;POST 绑定并保存,成功后重定向,字段校验失败时以 200 回显表单
    与逐字段错误.

    Attributes:
        form_definition: 资源表单定义配置.
        service: 表单处理器实例.

    """

    form_definition: ResourceFormDefinition[ResourceModelT]

    def __init__(self) -> None:
        """初始化视图.

        Raises:
            RuntimeError: 当子类未配置 form_definition 时抛出.

        """
        if not getattr(self, "form_definition", None):
            msg = f"{self.__class__.__name__} 未配置 form_definition"
            raise RuntimeError(msg)
        service_class = self.form_definition.service_class
        self.service: ResourceFormHandler[ResourceModelT] = service_class()

    # ------------------------------------------------------------------ #
    # HTTP Methods
    # ------------------------------------------------------------------ #
    def get(self, **kwargs: object) -> ResponseReturnValue:
        """GET 请求处理,显示表单."""
        resource = self._load_resource(self._resolve_resource_id(kwargs))
        context = self._build_context(resource)
        return render_template(self.form_definition.template, **context)

    def post(self, **kwargs: object) -> ResponseReturnValue:
        """POST 请求处理,提交表单.

        Returns:
            成功时返回重定向响应,失败时返回渲染的 HTML 字符串.

        """
        resolved_id = self._resolve_resource_id(kwargs)
        resource = self._load_resource(resolved_id)
        payload = self._extract_payload(request)

        def _execute() -> ResourceModelT:
            return self.service.upsert(payload, resource)

        try:
            instance = safe_route_call(
                _execute,
                module="resource_forms",
                action=f"{self.form_definition.name}_form_upsert",
                public_error="保存失败",
                context={
                    "form_name": self.form_definition.name,
                    "resource_id": resolved_id,
                    "form_mode": "create" if resource is None else "edit",
                },
            )
        except FormValidationError as exc:
            log_with_context(
                "info",
                "表单校验未通过",
                module="resource_forms",
                action=f"{self.form_definition.name}_form_upsert",
                context={"form_name": self.form_definition.name, "resource_id": resolved_id},
                extra={"invalid_fields": sorted(exc.field_errors)},
            )
            context = self._build_context(resource, form=exc.form, form_data=payload)
            return render_template(self.form_definition.template, **context)
        except AppError as exc:
            context = self._build_context(resource, form_data=payload, errors=str(exc))
            flash(str(exc), FlashCategory.ERROR)
            return render_template(self.form_definition.template, **context)

        flash(self.get_success_message(instance), FlashCategory.SUCCESS)
        return redirect(self._resolve_success_redirect(instance))

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    def _load_resource(self, resource_id: int | None) -> ResourceModelT | None:
        if resource_id is None:
            return None
        return self.service.load(resource_id)

    def _resolve_resource_id(self, kwargs: dict[str, object]) -> int | None:
        """从 URL 参数中解析资源 ID,创建模式下返回 None."""
        candidate = kwargs.get(self.form_definition.resource_id_arg)
        if isinstance(candidate, int):
            return candidate
        if isinstance(candidate, str):
            try:
                return int(candidate)
            except ValueError:
                return None
        return None

    def _extract_payload(self, req: Request) -> ResourcePayload:
        if req.is_json:
            return cast("ResourcePayload", req.get_json(silent=True) or {})
        return cast("ResourcePayload", req.form)

    def _build_context(
        self,
        resource: ResourceModelT | None,
        *,
        form: object | None = None,
        form_data: ResourcePayload | None = None,
        errors: str | None = None,
    ) -> TemplateContext:
        """构建模板上下文.

        Args:
            resource: 资源对象,创建模式下为 None.
            form: 已绑定并带有字段错误的表单对象.
            form_data: 原始提交数据.
            errors: 非字段级的错误消息.

        Returns:
            模板上下文字典.

        """
        base_context: TemplateContext = {
            "resource": resource,
            "form_mode": "edit" if resource else "create",
            "form_definition": self.form_definition,
            "form_fields": self.form_definition.fields,
            "form_errors": errors,
        }
        base_context.update(self.service.build_context(resource=resource, form=form, form_data=form_data))
        return base_context

    def _resolve_success_redirect(self, instance: ResourceModelT) -> str:
        endpoint = self.form_definition.redirect_endpoint
        if not endpoint:
            return request.referrer or url_for("main.index")
        redirect_kwargs = self._success_redirect_kwargs(instance)
        safe_kwargs = {k: v for k, v in redirect_kwargs.items() if v is not None and not str(k).startswith("_")}
        return url_for(endpoint, **safe_kwargs)

    def _success_redirect_kwargs(self, instance: ResourceModelT) -> dict[str, str | int | None]:
        """获取重定向的额外参数,默认把资源 ID 作为 URL 参数."""
        return {self.form_definition.resource_id_arg: instance.id}

    def get_success_message(self, instance: ResourceModelT) -> str:
        """获取成功消息."""
        del instance
        return self.form_definition.success_message
