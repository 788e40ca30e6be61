"""宠物诊所 - 主要路由."""

from http import HTTPStatus

from flask import Blueprint, render_template

from petclinic.types.routes import RouteReturn

# 创建蓝图
main_bp = Blueprint("main", __name__)


@main_bp.route("/")
def index() -> RouteReturn:
    """首页 - 欢迎页,提供查找宠物主人的入口.

    Returns:
        str: 欢迎页模板.

    """
    return render_template("welcome.html")


@main_bp.route("/favicon.ico")
def favicon() -> RouteReturn:
    """提供 favicon.ico,避免 404.

    Returns:
        Response: 空响应,状态码 204.

    """
    return "", HTTPStatus.NO_CONTENT
