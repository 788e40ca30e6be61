"""请求 ID 注入与请求完成日志.

每个请求在开始时确定 request_id(沿用上游合法的 ``X-Request-ID``,否则生成),
写入 contextvars 供日志与错误封套读取;响应阶段回写响应头,并输出一条
``http_request_completed`` 事件.
"""

from __future__ import annotations

import re
import time
from contextlib import suppress
from typing import TYPE_CHECKING
from uuid import uuid4

from flask import Flask, g, request

from petclinic.constants import HttpHeaders
from petclinic.utils.logging.context_vars import request_id_var
from petclinic.utils.structlog_config import get_logger

if TYPE_CHECKING:
    from werkzeug.wrappers.response import Response

_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.:-]{0,127}$")


def new_request_id() -> str:
    return f"req_{uuid4().hex}"


def accept_request_id(raw_value: str | None) -> str | None:
    """校验上游传入的请求 ID,不合法时返回 None."""
    value = (raw_value or "").strip()
    if value and _REQUEST_ID_PATTERN.fullmatch(value):
        return value
    return None


def _elapsed_ms() -> int | None:
    started_at = g.get("_request_started_at")
    if started_at is None:
        return None
    return round((time.perf_counter() - started_at) * 1000)


def _start_request() -> None:
    request_id = accept_request_id(request.headers.get(HttpHeaders.X_REQUEST_ID)) or new_request_id()
    g.request_id = request_id
    g._request_id_token = request_id_var.set(request_id)
    g._request_started_at = time.perf_counter()


def _finish_request(response: Response) -> Response:
    request_id = request_id_var.get() or g.get("request_id") or new_request_id()
    response.headers.setdefault(HttpHeaders.X_REQUEST_ID, request_id)

    status_code = response.status_code
    get_logger("http").info(
        "http_request_completed",
        module="http",
        action=f"{request.method} {request.path}",
        status_code=status_code,
        outcome="success" if status_code < 400 else "error",
        duration_ms=_elapsed_ms(),
        route=request.url_rule.rule if request.url_rule else None,
        endpoint=request.endpoint,
    )
    return response


def _release_request(_exc: BaseException | None) -> None:
    token = g.pop("_request_id_token", None)
    if token is None:
        return
    # 同一线程处理下一个请求前必须还原
    with suppress(LookupError, RuntimeError, ValueError):
        request_id_var.reset(token)


def register_request_logging(app: Flask) -> None:
    """为应用挂载请求 ID 与请求完成日志钩子."""
    app.before_request(_start_request)
    app.after_request(_finish_request)
    app.teardown_request(_release_request)


__all__ = ["accept_request_id", "new_request_id", "register_request_logging"]
