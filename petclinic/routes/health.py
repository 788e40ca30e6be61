"""宠物诊所 - 健康检查路由."""

from flask import Blueprint

from petclinic.infra.route_safety import safe_route_call
from petclinic.settings import APP_VERSION
from petclinic.types.routes import RouteReturn
from petclinic.utils.response_utils import jsonify_unified_success

# 创建蓝图
health_bp = Blueprint("health", __name__)


@health_bp.route("/ping")
def ping() -> RouteReturn:
    """存活探针.

    Returns:
        JSON 响应,包含服务状态和版本信息.

    """
    return safe_route_call(
        lambda: jsonify_unified_success(
            data={"status": "ok", "version": APP_VERSION},
            message="服务运行正常",
        ),
        module="health",
        action="ping",
        public_error="健康检查失败",
    )
