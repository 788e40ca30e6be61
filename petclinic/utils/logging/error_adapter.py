"""错误封套所需的上下文采集与元数据推导."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from flask import has_request_context, request
from werkzeug.exceptions import HTTPException

from petclinic.constants import HttpStatus
from petclinic.constants.system_constants import ErrorCategory, ErrorMessages, ErrorSeverity
from petclinic.errors import AppError
from petclinic.utils.logging.context_vars import request_id_var

_FALLBACK_SUGGESTIONS: tuple[str, ...] = ("联系管理员", "查看错误日志")

_SUGGESTIONS: dict[ErrorCategory, tuple[str, ...]] = {
    ErrorCategory.VALIDATION: ("检查输入数据", "根据提示修正请求参数"),
    ErrorCategory.BUSINESS: ("确认宠物主人编号", "返回查找页面重新检索"),
    ErrorCategory.SECURITY: ("刷新页面后重试", "联系管理员"),
    ErrorCategory.DATABASE: ("检查数据库连接", "稍后重试"),
    ErrorCategory.SYSTEM: _FALLBACK_SUGGESTIONS,
}


@dataclass(slots=True)
class ErrorContext:
    """一次错误对应的请求快照.

    Attributes:
        error: 捕获的异常.
        request: Flask 请求对象,请求上下文之外为 None.
        error_id: 封套中的错误编号,便于与日志对照.
        timestamp: 错误发生时间(UTC).
        request_id: 当前请求 ID.
        url: 请求 URL.
        method: HTTP 方法.
        extra: 附加的公开字段.

    """

    error: Exception
    request: Any | None = None
    error_id: str = field(default_factory=lambda: uuid4().hex)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    request_id: str | None = field(default_factory=request_id_var.get)
    url: str | None = None
    method: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def ensure_request(self) -> None:
        """在请求上下文中补齐 URL、方法与来源地址."""
        if self.request is None and has_request_context():
            self.request = request
        if self.request is None:
            return
        self.url = getattr(self.request, "url", self.url)
        self.method = getattr(self.request, "method", self.method)
        self.extra.setdefault("ip_address", getattr(self.request, "remote_addr", None))


@dataclass(slots=True)
class ErrorMetadata:
    """封套字段的推导结果."""

    status_code: int
    category: ErrorCategory
    severity: ErrorSeverity
    message_key: str
    message: str
    recoverable: bool


def _from_http_exception(error: HTTPException) -> ErrorMetadata:
    status_code = int(error.code or HttpStatus.INTERNAL_SERVER_ERROR)
    if status_code >= HttpStatus.INTERNAL_SERVER_ERROR:
        return ErrorMetadata(
            status_code=status_code,
            category=ErrorCategory.SYSTEM,
            severity=ErrorSeverity.HIGH,
            message_key="INTERNAL_ERROR",
            message=ErrorMessages.INTERNAL_ERROR,
            recoverable=False,
        )
    return ErrorMetadata(
        status_code=status_code,
        category=ErrorCategory.BUSINESS,
        severity=ErrorSeverity.MEDIUM,
        message_key="INVALID_REQUEST",
        message=error.description or ErrorMessages.INVALID_REQUEST,
        recoverable=True,
    )


def derive_error_metadata(error: Exception) -> ErrorMetadata:
    """按异常类型推导封套元数据.

    ``AppError`` 直接使用自身的分类与文案;``HTTPException`` 区分 4xx/5xx;
    其他异常一律视为系统错误,不向客户端暴露原始信息.
    """
    if isinstance(error, AppError):
        return ErrorMetadata(
            status_code=error.status_code,
            category=error.category,
            severity=error.severity,
            message_key=error.message_key,
            message=error.message,
            recoverable=error.recoverable,
        )
    if isinstance(error, HTTPException):
        return _from_http_exception(error)
    return ErrorMetadata(
        status_code=HttpStatus.INTERNAL_SERVER_ERROR,
        category=ErrorCategory.SYSTEM,
        severity=ErrorSeverity.HIGH,
        message_key="INTERNAL_ERROR",
        message=ErrorMessages.INTERNAL_ERROR,
        recoverable=False,
    )


def build_public_context(context: ErrorContext) -> dict[str, Any]:
    """生成封套中的 ``context`` 字段,只包含可以返回给客户端的信息."""
    context.ensure_request()
    public: dict[str, Any] = {"request_id": context.request_id}
    if context.url:
        public["url"] = context.url
    if context.method:
        public["method"] = context.method
    meta = {key: value for key, value in context.extra.items() if value is not None}
    if meta:
        public["meta"] = meta
    return public


def get_error_suggestions(category: ErrorCategory) -> list[str]:
    return list(_SUGGESTIONS.get(category, _FALLBACK_SUGGESTIONS))


__all__ = [
    "ErrorContext",
    "ErrorMetadata",
    "build_public_context",
    "derive_error_metadata",
    "get_error_suggestions",
]
