"""宠物诊所 - 宠物主人路由.

查找、详情为普通路由;创建与编辑由 ``OwnerFormView`` 统一处理.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import cast

from flask import Blueprint, redirect, render_template, request, url_for
from flask.typing import ResponseReturnValue

from petclinic.constants.system_constants import ErrorMessages
from petclinic.infra.route_safety import safe_route_call
from petclinic.schemas.owners import parse_owner_search
from petclinic.services.owners.owner_detail_read_service import OwnerDetailReadService
from petclinic.services.owners.owner_search_service import OwnerSearchService
from petclinic.types import OwnerSearchFilters, OwnerSearchForm, OwnerSearchKind
from petclinic.types.routes import RouteCallable, RouteReturn
from petclinic.views.owner_form_view import OwnerFormView

# 创建蓝图
owners_bp = Blueprint("owners", __name__)

FIND_TEMPLATE = "owners/findOwners.html"
LIST_TEMPLATE = "owners/ownersList.html"
DETAIL_TEMPLATE = "owners/ownerDetails.html"


@owners_bp.route("/find")
def find_owners() -> RouteReturn:
    """显示按姓名查找的表单.

    Returns:
        str: 空白查找表单.

    """
    return render_template(FIND_TEMPLATE, owner=OwnerSearchForm())


@owners_bp.route("", strict_slashes=False)
def process_find_form() -> RouteReturn:
    """执行查找并按匹配数量分流.

    - 无匹配: 重新渲染查找表单, ``lastName`` 字段提示未找到.
    - 唯一匹配: 重定向到该宠物主人详情页.
    - 多条匹配: 渲染列表页.

    """
    query = parse_owner_search(request.args)
    filters = OwnerSearchFilters(last_name=query.last_name, first_name=query.first_name)

    def _execute() -> RouteReturn:
        outcome = OwnerSearchService().search(filters)
        if outcome.kind is OwnerSearchKind.NOT_FOUND:
            form = OwnerSearchForm(
                last_name=filters.last_name,
                first_name=filters.first_name,
                errors={"lastName": [ErrorMessages.OWNER_SEARCH_NOT_FOUND]},
            )
            return render_template(FIND_TEMPLATE, owner=form)
        if outcome.kind is OwnerSearchKind.SINGLE:
            return redirect(url_for("owners.show_owner", owner_id=outcome.single.id))
        return render_template(LIST_TEMPLATE, selections=list(outcome.owners), filters=filters)

    return safe_route_call(
        _execute,
        module="owners",
        action="search_owners",
        public_error="查找宠物主人失败",
        context={"last_name": filters.last_name, "first_name": filters.first_name},
    )


@owners_bp.route("/<int:owner_id>")
def show_owner(owner_id: int) -> RouteReturn:
    """显示宠物主人详情.

    Raises:
        NotFoundError: 宠物主人不存在时抛出,由全局错误处理器转换为 404.

    """

    def _execute() -> RouteReturn:
        owner = OwnerDetailReadService().get_owner_or_error(owner_id)
        return render_template(DETAIL_TEMPLATE, owner=owner)

    return safe_route_call(
        _execute,
        module="owners",
        action="show_owner",
        public_error="获取宠物主人详情失败",
        context={"owner_id": owner_id},
    )


# ---------------------------------------------------------------------------
# 表单路由
# ---------------------------------------------------------------------------
_owner_create_view = cast(
    Callable[..., ResponseReturnValue],
    OwnerFormView.as_view("owner_create_form"),
)

owners_bp.add_url_rule(
    "/new",
    view_func=cast(RouteCallable, _owner_create_view),
    methods=["GET", "POST"],
    endpoint="new",
)

_owner_edit_view = cast(
    Callable[..., ResponseReturnValue],
    OwnerFormView.as_view("owner_edit_form"),
)

owners_bp.add_url_rule(
    "/<int:owner_id>/edit",
    view_func=cast(RouteCallable, _owner_edit_view),
    methods=["GET", "POST"],
    endpoint="edit",
)
