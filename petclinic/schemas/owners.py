"""宠物主人表单与查找参数 schema."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import Field, ValidationError as PydanticValidationError, field_validator

from petclinic.constants.system_constants import ErrorMessages
from petclinic.constants.validation_limits import (
    OWNER_ADDRESS_MAX_LENGTH,
    OWNER_CITY_MAX_LENGTH,
    OWNER_NAME_MAX_LENGTH,
    TELEPHONE_COLUMN_LENGTH,
    TELEPHONE_MAX_DIGITS,
)
from petclinic.schemas.base import PayloadSchema, QuerySchema
from petclinic.schemas.validation import SchemaMessageKeyError, collect_field_errors
from petclinic.types import FieldErrors, OwnerForm

# 前导零不计入位数
_TELEPHONE_PATTERN = re.compile(rf"^0*\d{{1,{TELEPHONE_MAX_DIGITS}}}$")

OWNER_FORM_FIELDS: tuple[str, ...] = ("firstName", "lastName", "address", "city", "telephone")


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def _require_text(value: Any, *, max_length: int) -> str:
    cleaned = _as_text(value)
    if not cleaned:
        raise SchemaMessageKeyError(ErrorMessages.FIELD_REQUIRED, message_key="FIELD_REQUIRED")
    if len(cleaned) > max_length:
        raise SchemaMessageKeyError(
            ErrorMessages.FIELD_TOO_LONG.format(max_length=max_length),
            message_key="FIELD_TOO_LONG",
        )
    return cleaned


class OwnerFormPayload(PayloadSchema):
    """创建/编辑宠物主人的表单 payload.

    五个字段均为必填,电话号码只允许数字.缺失字段同样会经过校验,
    因此一次提交中所有不合法的字段都会被报告.
    """

    first_name: str = Field(default="", alias="firstName", validate_default=True)
    last_name: str = Field(default="", alias="lastName", validate_default=True)
    address: str = Field(default="", validate_default=True)
    city: str = Field(default="", validate_default=True)
    telephone: str = Field(default="", validate_default=True)

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def _validate_name(cls, value: Any) -> str:
        return _require_text(value, max_length=OWNER_NAME_MAX_LENGTH)

    @field_validator("address", mode="before")
    @classmethod
    def _validate_address(cls, value: Any) -> str:
        return _require_text(value, max_length=OWNER_ADDRESS_MAX_LENGTH)

    @field_validator("city", mode="before")
    @classmethod
    def _validate_city(cls, value: Any) -> str:
        return _require_text(value, max_length=OWNER_CITY_MAX_LENGTH)

    @field_validator("telephone", mode="before")
    @classmethod
    def _validate_telephone(cls, value: Any) -> str:
        cleaned = _as_text(value)
        if not cleaned:
            raise SchemaMessageKeyError(ErrorMessages.FIELD_REQUIRED, message_key="FIELD_REQUIRED")
        if not _TELEPHONE_PATTERN.match(cleaned):
            raise SchemaMessageKeyError(
                ErrorMessages.TELEPHONE_INVALID.format(max_digits=TELEPHONE_MAX_DIGITS),
                message_key="TELEPHONE_INVALID",
            )
        if len(cleaned) > TELEPHONE_COLUMN_LENGTH:
            raise SchemaMessageKeyError(
                ErrorMessages.FIELD_TOO_LONG.format(max_length=TELEPHONE_COLUMN_LENGTH),
                message_key="FIELD_TOO_LONG",
            )
        return cleaned


class OwnerSearchQuery(QuerySchema):
    """按姓名查找的 query 参数,缺省为空字符串(不过滤)."""

    last_name: str = Field(default="", alias="lastName")
    first_name: str = Field(default="", alias="firstName")

    @field_validator("last_name", "first_name", mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> str:
        return _as_text(value)


@dataclass(slots=True)
class OwnerBinding:
    """表单绑定结果.

    Attributes:
        form: 回显用的表单对象,保留原始提交值与字段错误.
        values: 校验通过时的规范化 payload,存在错误时为 None.
        errors: 表单字段名 -> 错误文案列表.

    """

    form: OwnerForm
    values: OwnerFormPayload | None = None
    errors: FieldErrors = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.values is not None and not self.errors


def bind_owner_form(raw_params: Mapping[str, Any], *, owner_id: int | None = None) -> OwnerBinding:
    """把原始表单参数绑定为 OwnerForm 并执行校验.

    纯函数,不触碰持久化层.

    Args:
        raw_params: 原始请求参数(``request.form`` 或普通字典).
        owner_id: 编辑场景下的宠物主人 ID.

    Returns:
        OwnerBinding,其中 ``errors`` 覆盖所有不合法的字段.

    """
    submitted = {name: raw_params.get(name) for name in OWNER_FORM_FIELDS}
    form = OwnerForm(
        first_name=_as_text(submitted["firstName"]),
        last_name=_as_text(submitted["lastName"]),
        address=_as_text(submitted["address"]),
        city=_as_text(submitted["city"]),
        telephone=_as_text(submitted["telephone"]),
        id=owner_id,
    )
    try:
        values = OwnerFormPayload.model_validate(submitted)
    except PydanticValidationError as exc:
        errors = collect_field_errors(OwnerFormPayload, exc)
        form.errors = errors
        return OwnerBinding(form=form, values=None, errors=errors)
    return OwnerBinding(form=form, values=values)


def parse_owner_search(raw_params: Mapping[str, Any]) -> OwnerSearchQuery:
    """解析查找参数,未提供的字段视为空字符串."""
    return OwnerSearchQuery.model_validate(
        {"lastName": raw_params.get("lastName"), "firstName": raw_params.get("firstName")},
    )


__all__ = [
    "OWNER_FORM_FIELDS",
    "OwnerBinding",
    "OwnerFormPayload",
    "OwnerSearchQuery",
    "bind_owner_form",
    "parse_owner_search",
]
