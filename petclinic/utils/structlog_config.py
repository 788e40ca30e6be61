"""宠物诊所结构化日志.

structlog 只配置一次,通过 stdlib LoggerFactory 输出;业务代码统一使用
``get_logger``/``log_info`` 等入口,错误封套由 ``enhanced_error_handler`` 生成.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, cast

import structlog
from flask import Flask, current_app, has_request_context

from petclinic.constants.system_constants import ErrorSeverity
from petclinic.settings import APP_VERSION
from petclinic.types import ContextDict, JsonValue, LoggerExtra, StructlogEventDict
from petclinic.utils.logging.context_vars import request_id_var
from petclinic.utils.logging.error_adapter import (
    ErrorContext,
    ErrorMetadata,
    build_public_context,
    derive_error_metadata,
    get_error_suggestions,
)

if TYPE_CHECKING:
    from structlog.typing import BindableLogger, Processor

LogField = JsonValue | ContextDict | LoggerExtra
ErrorPayload = dict[str, LogField]

# 错误严重度 -> structlog 方法名
_SEVERITY_LOG_LEVEL: dict[ErrorSeverity, str] = {
    ErrorSeverity.LOW: "warning",
    ErrorSeverity.MEDIUM: "warning",
    ErrorSeverity.HIGH: "error",
    ErrorSeverity.CRITICAL: "critical",
}


def _inject_request_id(
    _logger: BindableLogger,
    _method_name: str,
    event_dict: StructlogEventDict,
) -> StructlogEventDict:
    if has_request_context():
        event_dict["request_id"] = request_id_var.get()
    return event_dict


def _inject_app_identity(
    logger: BindableLogger,
    _method_name: str,
    event_dict: StructlogEventDict,
) -> StructlogEventDict:
    try:
        config = current_app.config
        event_dict["app_name"] = config["APP_NAME"]
        event_dict["app_version"] = config["APP_VERSION"]
        event_dict["environment"] = config.get("ENV", "development")
    except (RuntimeError, KeyError):
        # 应用上下文之外(脚本启动阶段)
        event_dict["app_name"] = "宠物诊所"
        event_dict["app_version"] = APP_VERSION
    event_dict["logger_name"] = getattr(logger, "name", "unknown")
    return event_dict


class StructlogConfig:
    """structlog 处理器链的一次性配置.

    Attributes:
        configured: 处理器链是否已经写入 structlog 全局配置.

    """

    def __init__(self) -> None:
        self.configured = False

    def configure(self, app: Flask | None = None) -> None:
        """写入处理器链,重复调用无副作用;传入 app 时登记到 ``app.extensions``."""
        if not self.configured:
            structlog.configure(
                processors=cast("list[structlog.types.Processor]", self.build_processors()),
                context_class=dict,
                logger_factory=structlog.stdlib.LoggerFactory(),
                wrapper_class=structlog.stdlib.BoundLogger,
                cache_logger_on_first_use=True,
            )
            self.configured = True

        if app is not None:
            app.extensions["structlog_config"] = self

    @staticmethod
    def build_processors() -> list[Processor]:
        """组装处理器链,最后一个为渲染器."""
        return [
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _inject_request_id,
            _inject_app_identity,
            _select_renderer(),
        ]


def _select_renderer() -> Processor:
    # 终端下彩色输出,其余场景(容器/文件)输出 JSON 行
    if sys.stdout.isatty():
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.processors.JSONRenderer(ensure_ascii=False)


structlog_config = StructlogConfig()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """返回指定名称的结构化 logger,首次调用时完成 structlog 配置."""
    structlog_config.configure()
    return structlog.get_logger(name)


def get_system_logger() -> structlog.stdlib.BoundLogger:
    """返回脚本与 CLI 使用的系统 logger."""
    return get_logger("system")


def configure_structlog(app: Flask) -> None:
    """为应用启用结构化日志,并在应用上下文异常结束时补记一条错误日志.

    Args:
        app: Flask 应用实例.

    """
    structlog_config.configure(app)

    @app.teardown_appcontext
    def log_teardown_error(exception: BaseException | None) -> None:
        if exception:
            get_logger("app").error("应用请求处理异常", module="system", exception=str(exception))


def _emit(level: str, message: str, module: str, exception: BaseException | None, **kwargs: LogField) -> None:
    logger = get_logger("app")
    if exception is not None:
        kwargs["error"] = str(exception)
    getattr(logger, level)(message, module=module, **kwargs)


def log_info(message: str, module: str = "app", **kwargs: LogField) -> None:
    """记录业务事件.

    Example:
        >>> log_info('宠物主人创建成功', module='owners', owner_id=1)

    """
    _emit("info", message, module, None, **kwargs)


def enhanced_error_handler(
    error: Exception,
    context: ErrorContext | None = None,
    *,
    extra: LoggerExtra | None = None,
) -> ErrorPayload:
    """把异常转换为统一错误封套并按严重度记录日志.

    Args:
        error: 异常对象.
        context: 错误上下文,缺省时按当前请求生成.
        extra: 附加到封套 ``extra`` 字段的信息.

    Returns:
        包含 error_id、category、severity、message_code、message 等字段的字典.

    """
    context = context or ErrorContext(error)
    context.ensure_request()
    metadata = derive_error_metadata(error)

    payload: ErrorPayload = {
        "error": True,
        "error_id": context.error_id,
        "category": metadata.category.value,
        "severity": metadata.severity.value,
        "message_code": metadata.message_key,
        "message": metadata.message,
        "timestamp": context.timestamp.isoformat(),
        "recoverable": metadata.recoverable,
        "suggestions": get_error_suggestions(metadata.category),
        "context": build_public_context(context),
    }
    if extra:
        payload["extra"] = dict(extra)

    _log_error_payload(error, metadata, payload)
    return payload


def _log_error_payload(error: Exception, metadata: ErrorMetadata, payload: ErrorPayload) -> None:
    fields: dict[str, LogField] = {
        "error_id": payload["error_id"],
        "category": payload["category"],
        "severity": payload["severity"],
        "message_code": payload["message_code"],
        "context": payload["context"],
    }
    if "extra" in payload:
        fields["extra"] = payload["extra"]

    level = _SEVERITY_LOG_LEVEL.get(metadata.severity, "error")
    _emit(level, str(payload["message"]), "error_handler", error, **fields)


__all__ = [
    "ErrorContext",
    "ErrorMetadata",
    "configure_structlog",
    "enhanced_error_handler",
    "get_logger",
    "get_system_logger",
    "log_info",
]
