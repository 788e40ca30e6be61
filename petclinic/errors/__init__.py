"""宠物诊所统一异常.

每个异常类通过 ``metadata`` 声明 HTTP 状态码、分类、严重度与默认文案键,
全局错误处理器据此生成 JSON 错误封套.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from werkzeug.exceptions import HTTPException

from petclinic.constants import HttpStatus
from petclinic.constants.system_constants import ErrorCategory, ErrorMessages, ErrorSeverity

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from petclinic.types.structures import LoggerExtra


@dataclass(frozen=True, slots=True)
class ExceptionMetadata:
    """异常类级别的默认值."""

    status_code: int
    category: ErrorCategory
    severity: ErrorSeverity
    default_message_key: str

    @property
    def default_message(self) -> str:
        return getattr(ErrorMessages, self.default_message_key, ErrorMessages.INTERNAL_ERROR)


class AppError(Exception):
    """业务异常基类.

    Args:
        message: 对外文案,缺省时取 ``message_key`` 在 ``ErrorMessages`` 中的文案.
        message_key: 文案键,同时作为封套中的 ``message_code``.
        extra: 写入日志的附加字段.
        severity: 覆盖类默认的严重度.
        category: 覆盖类默认的分类.
        status_code: 覆盖类默认的 HTTP 状态码.

    """

    metadata = ExceptionMetadata(
        status_code=HttpStatus.INTERNAL_SERVER_ERROR,
        category=ErrorCategory.SYSTEM,
        severity=ErrorSeverity.HIGH,
        default_message_key="INTERNAL_ERROR",
    )

    def __init__(
        self,
        message: str | None = None,
        *,
        message_key: str | None = None,
        extra: LoggerExtra | None = None,
        severity: ErrorSeverity | None = None,
        category: ErrorCategory | None = None,
        status_code: int | None = None,
    ) -> None:
        defaults = self.metadata
        self.message_key = message_key or defaults.default_message_key
        self.message = message or getattr(ErrorMessages, self.message_key, defaults.default_message)
        self.extra = dict(extra or {})
        self.severity = severity or defaults.severity
        self.category = category or defaults.category
        self.status_code = int(status_code or defaults.status_code)
        super().__init__(self.message)

    @property
    def recoverable(self) -> bool:
        """LOW/MEDIUM 严重度视为用户可自行恢复."""
        return self.severity in (ErrorSeverity.LOW, ErrorSeverity.MEDIUM)


class ValidationError(AppError):
    """请求参数不合法(400)."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.BAD_REQUEST,
        category=ErrorCategory.VALIDATION,
        severity=ErrorSeverity.LOW,
        default_message_key="VALIDATION_ERROR",
    )


class FormValidationError(ValidationError):
    """表单字段校验失败.

    携带逐字段错误与已绑定的表单对象.表单视图捕获后以 200 重新渲染表单,
    该异常不会以错误封套的形式返回.

    Attributes:
        field_errors: 表单字段名 -> 错误文案列表.
        form: 保留原始提交值的表单对象.

    """

    def __init__(
        self,
        field_errors: Mapping[str, Sequence[str]],
        *,
        form: object | None = None,
        message: str | None = None,
    ) -> None:
        self.field_errors: dict[str, list[str]] = {name: list(messages) for name, messages in field_errors.items()}
        self.form = form
        super().__init__(message, extra={"invalid_fields": sorted(self.field_errors)})


class NotFoundError(AppError):
    """按 ID 查找的宠物主人等资源不存在(404)."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.NOT_FOUND,
        category=ErrorCategory.BUSINESS,
        severity=ErrorSeverity.LOW,
        default_message_key="RESOURCE_NOT_FOUND",
    )


class DatabaseError(AppError):
    """数据库读写失败(500)."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.INTERNAL_SERVER_ERROR,
        category=ErrorCategory.DATABASE,
        severity=ErrorSeverity.HIGH,
        default_message_key="DATABASE_QUERY_ERROR",
    )


class SystemError(AppError):
    """无法归类的内部错误(500),safe_route_call 的默认兜底类型."""


def map_exception_to_status(error: BaseException, default: int = HttpStatus.INTERNAL_SERVER_ERROR) -> int:
    """推导异常对应的 HTTP 状态码.

    Args:
        error: 异常对象.
        default: 非业务异常且非 HTTPException 时使用的状态码.

    Returns:
        HTTP 状态码.

    """
    if isinstance(error, AppError):
        return error.status_code
    if isinstance(error, HTTPException) and error.code is not None:
        return int(error.code)
    return int(default)


__all__ = [
    "AppError",
    "DatabaseError",
    "ExceptionMetadata",
    "FormValidationError",
    "NotFoundError",
    "SystemError",
    "ValidationError",
    "map_exception_to_status",
]
