"""Schema 校验与错误映射."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ValidationError as PydanticValidationError

from petclinic.types import FieldErrors

_DEFAULT_MESSAGE = "参数校验失败"


class SchemaMessageKeyError(ValueError):
    """用于从 schema validator 透传 message_key 的错误类型."""

    def __init__(self, message: str, *, message_key: str) -> None:
        """构造错误并携带 message_key."""
        super().__init__(message)
        self.message_key = message_key


def collect_field_errors(model: type[BaseModel], exc: PydanticValidationError) -> FieldErrors:
    """把 pydantic 的全部错误按表单字段名归组.

    Args:
        model: 触发错误的 pydantic model,用于把属性名换回表单字段名.
        exc: pydantic 校验异常.

    Returns:
        表单字段名 -> 错误文案列表,字段顺序与 model 定义一致.

    """
    alias_by_name = {name: info.alias or name for name, info in model.model_fields.items()}
    grouped: FieldErrors = {}
    for error in exc.errors():
        loc = error.get("loc")
        field = str(loc[0]) if isinstance(loc, tuple) and loc else "__all__"
        field = alias_by_name.get(field, field)
        message, _ = _error_message(error)
        messages = grouped.setdefault(field, [])
        if message not in messages:
            messages.append(message)

    ordered = [alias for alias in alias_by_name.values() if alias in grouped]
    ordered += [field for field in grouped if field not in ordered]
    return {field: grouped[field] for field in ordered}


def _error_message(error: Mapping[str, object]) -> tuple[str, str | None]:
    ctx = error.get("ctx")
    if isinstance(ctx, Mapping) and "error" in ctx:
        raw_error = ctx.get("error")
        if isinstance(raw_error, SchemaMessageKeyError):
            return str(raw_error), raw_error.message_key
        if isinstance(raw_error, BaseException):
            return str(raw_error), None

    msg = error.get("msg")
    if isinstance(msg, str) and msg.strip():
        return msg, None
    return _DEFAULT_MESSAGE, None
