"""统一 JSON 响应封套.

成功: ``{"success": true, "error": false, "message", "timestamp", "data"?, "meta"?}``;
失败: ``enhanced_error_handler`` 生成的错误封套再补上 ``"success": false``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from flask import Response, jsonify

from petclinic.constants import HttpStatus
from petclinic.constants.system_constants import SuccessMessages
from petclinic.errors import map_exception_to_status
from petclinic.utils.structlog_config import ErrorContext, enhanced_error_handler
from petclinic.utils.time_utils import time_utils

if TYPE_CHECKING:
    from collections.abc import Mapping

    from petclinic.types import JsonDict, JsonValue


def unified_success_response(
    data: object | None = None,
    message: object | None = None,
    *,
    status: int = HttpStatus.OK,
    meta: Mapping[str, object] | None = None,
) -> tuple[JsonDict, int]:
    """构造成功封套.

    Args:
        data: 业务数据,为 None 时不输出 ``data`` 字段.
        message: 提示文案,缺省为"操作成功".
        status: HTTP 状态码.
        meta: 分页等附加信息.

    Returns:
        (封套字典, HTTP 状态码).

    """
    payload: JsonDict = {
        "success": True,
        "error": False,
        "message": SuccessMessages.OPERATION_SUCCESS if message is None else str(message),
        "timestamp": time_utils.now().isoformat(),
    }
    if data is not None:
        payload["data"] = cast("JsonValue", data)
    if meta:
        payload["meta"] = cast("JsonDict", dict(meta))
    return payload, status


def unified_error_response(
    error: BaseException,
    *,
    status_code: int | None = None,
    extra: Mapping[str, JsonValue] | None = None,
    context: ErrorContext | None = None,
) -> tuple[JsonDict, int]:
    """构造错误封套,状态码缺省时按异常类型推导."""
    exc = error if isinstance(error, Exception) else Exception(str(error))
    payload = cast("JsonDict", enhanced_error_handler(exc, context or ErrorContext(exc), extra=extra))
    payload.setdefault("success", False)
    return payload, status_code or map_exception_to_status(exc)


def jsonify_unified_success(*args: object, **kwargs: object) -> tuple[Response, int]:
    payload, status = unified_success_response(*args, **kwargs)  # type: ignore[arg-type]
    return jsonify(payload), status


def jsonify_unified_error(error: BaseException, **kwargs: object) -> tuple[Response, int]:
    payload, status = unified_error_response(error, **kwargs)  # type: ignore[arg-type]
    return jsonify(payload), status


__all__ = [
    "jsonify_unified_error",
    "jsonify_unified_success",
    "unified_error_response",
    "unified_success_response",
]
