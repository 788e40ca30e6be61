"""路由层的事务边界与结构化日志.

``safe_route_call`` 把一次请求内的业务调用视为一个工作单元: 成功则提交,
任何异常都先回滚.业务异常(``AppError``/``HTTPException``)原样抛出交给
全局错误处理器,其余异常记录后转换为对外文案统一的 ``SystemError``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Literal, TypedDict, TypeVar, Unpack, cast

from werkzeug.exceptions import HTTPException

from petclinic import db
from petclinic.errors import AppError, SystemError
from petclinic.utils.structlog_config import get_logger

if TYPE_CHECKING:
    from petclinic.types import ContextDict, ContextMapping, LoggerExtra

R = TypeVar("R")
LogLevel = Literal["debug", "info", "warning", "error", "critical"]
DEFAULT_EXPECTED_EXCEPTIONS: tuple[type[BaseException], ...] = (AppError, HTTPException)


class LogContextOptions(TypedDict, total=False):
    """log_with_context 的可选参数."""

    context: ContextMapping | None
    extra: LoggerExtra | None
    logger_name: str


class RouteSafetyOptions(TypedDict, total=False):
    """safe_route_call 的可选参数."""

    context: ContextMapping | None
    extra: LoggerExtra | None
    expected_exceptions: tuple[type[BaseException], ...]
    fallback_exception: type[AppError]
    log_event: str


def log_with_context(
    level: LogLevel,
    event: str,
    *,
    module: str,
    action: str,
    **options: Unpack[LogContextOptions],
) -> None:
    """输出带 module/action 字段的结构化日志.

    Args:
        level: structlog 方法名,例如 "info".
        event: 事件描述.
        module: 所属模块,用于过滤.
        action: 当前动作,通常对应视图名.
        **options: context 与 extra 会依次合并进日志字段;logger_name 默认为 "app".

    """
    fields: ContextDict = {"module": module, "action": action}
    for key in ("context", "extra"):
        values = cast("ContextMapping | None", options.get(key))
        if values:
            fields.update(values)

    logger = get_logger(options.get("logger_name", "app"))
    getattr(logger, level, logger.error)(event, **fields)


class _FailureLogger:
    """同一次 safe_route_call 内共享的失败日志参数."""

    def __init__(self, *, module: str, action: str, event: str, context: ContextDict, extra: LoggerExtra) -> None:
        self.module = module
        self.action = action
        self.event = event
        self.context = context
        self.extra = extra

    def __call__(self, level: LogLevel, exc: BaseException, **fields: object) -> None:
        log_with_context(
            level,
            self.event,
            module=self.module,
            action=self.action,
            context=self.context,
            extra={**self.extra, "error_type": exc.__class__.__name__, **fields},
        )


def safe_route_call(
    func: Callable[[], R],
    *,
    module: str,
    action: str,
    public_error: str,
    **options: Unpack[RouteSafetyOptions],
) -> R:
    """在事务边界内执行视图逻辑.

    Args:
        func: 业务闭包.
        module: 日志模块名.
        action: 业务动作名,例如 "owner_form_upsert".
        public_error: 非预期异常时返回给客户端的文案.
        **options: context, extra, expected_exceptions, fallback_exception, log_event.

    Returns:
        业务闭包的返回值.

    Raises:
        AppError: 业务异常原样抛出;非预期异常或提交失败时抛出 fallback_exception.

    """
    expected = DEFAULT_EXPECTED_EXCEPTIONS + tuple(options.get("expected_exceptions") or ())
    fallback_exception = options.get("fallback_exception", SystemError)
    log_failure = _FailureLogger(
        module=module,
        action=action,
        event=options.get("log_event") or f"{action}执行失败",
        context=dict(cast("ContextMapping | None", options.get("context")) or {}),
        extra=dict(cast("LoggerExtra | None", options.get("extra")) or {}),
    )

    try:
        result = func()
    except expected as exc:
        db.session.rollback()
        log_failure("warning", exc, error_message=str(exc))
        raise
    except Exception as exc:
        db.session.rollback()
        log_failure("error", exc, unexpected=True)
        raise fallback_exception(public_error) from exc

    try:
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        log_failure("error", exc, unexpected=True, commit_failed=True)
        raise fallback_exception(public_error) from exc
    return result


__all__ = ["log_with_context", "safe_route_call"]
