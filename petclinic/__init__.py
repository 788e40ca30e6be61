"""宠物诊所 - Flask 应用初始化.

基于 Flask 的宠物主人管理 Web 应用.
"""

import logging
from importlib import import_module
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from flask import Blueprint, Flask, request
from flask.typing import ResponseReturnValue
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect
from werkzeug.middleware.proxy_fix import ProxyFix

from petclinic.constants import FlashCategory
from petclinic.infra.logging.request_middleware import register_request_logging
from petclinic.settings import Settings
from petclinic.utils.response_utils import jsonify_unified_error
from petclinic.utils.structlog_config import (
    ErrorContext,
    configure_structlog,
    get_system_logger,
)
from petclinic.utils.time_utils import time_utils

if TYPE_CHECKING:
    from petclinic.services.owners.demo_data_service import DemoDataSeedOutcome

# 初始化扩展
db = SQLAlchemy()
migrate = Migrate()
csrf = CSRFProtect()


def create_app(*, settings: Settings | None = None) -> Flask:
    """创建 Flask 应用实例.

    Args:
        settings: 可选的配置对象,用于测试或多环境启动.

    Returns:
        Flask: Flask 应用实例

    """
    resolved_settings = settings or Settings.load()
    app = Flask(__name__)

    # 配置应用
    configure_app(app, resolved_settings)

    # 配置会话安全
    configure_security(app, resolved_settings)

    # 初始化扩展
    initialize_extensions(app)

    # 注册蓝图
    configure_blueprints(app)

    # 配置日志
    configure_logging(app)

    # 配置统一日志系统
    configure_structlog(app)
    register_request_logging(app)

    # 设置全局日志级别
    log_level_name = str(app.config.get("LOG_LEVEL", "INFO"))
    logging.getLogger().setLevel(getattr(logging, log_level_name, logging.INFO))

    # 注册全局错误处理器
    @app.errorhandler(Exception)
    def handle_global_exception(error: Exception) -> ResponseReturnValue:
        """全局错误处理."""
        return jsonify_unified_error(error, context=ErrorContext(error, request))

    # 配置模板过滤器与全局变量
    configure_template_filters(app)

    # 注册命令行
    configure_cli(app)

    if resolved_settings.seed_demo_data:
        seed_demo_data_on_start(app)

    return app


def configure_app(app: Flask, settings: Settings) -> None:
    """写入 Settings 提供的配置并注册基础钩子.

    Args:
        app: Flask 应用实例.
        settings: 统一配置对象,包含环境变量解析、默认值与校验结果.

    """
    app.config.from_mapping(settings.to_flask_config())
    app.config.setdefault("APPLICATION_ROOT", "/")
    _apply_proxy_fix(app, settings)


def _apply_proxy_fix(app: Flask, settings: Settings) -> None:
    """信任前置代理写入的 X-Forwarded-* 头,直连部署时 TRUSTED_PROXY_COUNT=0 关闭."""
    hops = settings.trusted_proxy_count
    if hops > 0:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=hops, x_proto=hops, x_host=hops)  # type: ignore[method-assign]


def configure_security(app: Flask, settings: Settings) -> None:
    """配置会话安全参数与 Cookie 选项.

    Args:
        app: Flask 应用实例.
        settings: 统一配置对象,提供会话超时等参数.

    """
    app.config["PERMANENT_SESSION_LIFETIME"] = settings.session_lifetime_seconds
    app.config["SESSION_COOKIE_SECURE"] = settings.is_production
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
    app.config["SESSION_COOKIE_NAME"] = "petclinic_session"


def initialize_extensions(app: Flask) -> None:
    """初始化数据库、迁移与 CSRF 扩展.

    Args:
        app: Flask 应用实例.

    """
    # 初始化数据库
    db.init_app(app)
    migrate.init_app(app, db)

    # 初始化CSRF保护
    csrf.init_app(app)


def configure_blueprints(app: Flask) -> None:
    """注册所有蓝图以暴露路由.

    Args:
        app: Flask 应用实例.

    """
    blueprint_specs: list[tuple[str, str, str | None]] = [
        ("petclinic.routes.main", "main_bp", None),
        ("petclinic.routes.health", "health_bp", "/health"),
        ("petclinic.routes.owners", "owners_bp", "/owners"),
    ]

    blueprints: list[tuple[Blueprint, str | None]] = []
    for module_path, attr_name, prefix in blueprint_specs:
        module = import_module(module_path)
        blueprint = getattr(module, attr_name)
        blueprints.append((blueprint, prefix))

    for blueprint, prefix in blueprints:
        if prefix:
            app.register_blueprint(blueprint, url_prefix=prefix)
        else:
            app.register_blueprint(blueprint)


def configure_logging(app: Flask) -> None:
    """配置日志系统与文件处理器.

    Args:
        app: Flask 应用实例.

    """
    if not app.debug and not app.testing:
        # 创建日志目录
        log_path = Path(app.config["LOG_FILE"])
        log_dir = log_path.parent
        log_dir.mkdir(parents=True, exist_ok=True)

        # 配置文件日志处理器
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=app.config["LOG_MAX_SIZE"],
            backupCount=app.config["LOG_BACKUP_COUNT"],
        )
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]"),
        )
        file_handler.setLevel(getattr(logging, app.config["LOG_LEVEL"]))
        app.logger.addHandler(file_handler)

        app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"]))
        app.logger.info("宠物诊所应用启动")


def configure_template_filters(app: Flask) -> None:
    """注册日期过滤器与模板全局变量.

    Args:
        app: Flask 应用实例.

    """

    @app.template_filter("display_date")
    def display_date_filter(value: object) -> str:
        """日期格式化过滤器."""
        return time_utils.format_date(value)  # type: ignore[arg-type]

    @app.context_processor
    def inject_layout_globals() -> dict[str, object]:
        return {
            "app_name": app.config.get("APP_NAME"),
            "app_version": app.config.get("APP_VERSION"),
            "flash_bootstrap_class": FlashCategory.get_bootstrap_class,
        }


def configure_cli(app: Flask) -> None:
    """注册 flask 命令行子命令.

    Args:
        app: Flask 应用实例.

    """

    @app.cli.command("seed-demo-data")
    def seed_demo_data_command() -> None:
        """写入演示数据(宠物主人表为空时)."""
        outcome = _seed_demo_data()
        get_system_logger().info(
            "演示数据命令执行完成",
            module="demo_data",
            skipped=outcome.skipped,
            owners_created=outcome.owners_created,
            pets_created=outcome.pets_created,
        )


def seed_demo_data_on_start(app: Flask) -> None:
    """启动时建表并写入演示数据,仅用于本地开发.

    Args:
        app: Flask 应用实例.

    """
    with app.app_context():
        db.create_all()
        _seed_demo_data()


def _seed_demo_data() -> "DemoDataSeedOutcome":
    from petclinic.infra.route_safety import safe_route_call
    from petclinic.services.owners.demo_data_service import OwnerDemoDataService

    return safe_route_call(
        OwnerDemoDataService().seed,
        module="demo_data",
        action="seed_demo_data",
        public_error="演示数据写入失败",
    )


from petclinic.models import owner, pet  # noqa: F401, E402
