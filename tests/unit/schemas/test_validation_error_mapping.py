import pytest
from pydantic import ValidationError as PydanticValidationError, field_validator

from petclinic.schemas.base import PayloadSchema
from petclinic.schemas.validation import SchemaMessageKeyError, collect_field_errors


class _NicknameSchema(PayloadSchema):
    nickname: str

    @field_validator("nickname")
    @classmethod
    def _validate_nickname(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("昵称不能为空")
        return value


@pytest.mark.unit
def test_collect_field_errors_uses_original_value_error_message() -> None:
    with pytest.raises(PydanticValidationError) as excinfo:
        _NicknameSchema.model_validate({"nickname": "   "})

    assert collect_field_errors(_NicknameSchema, excinfo.value) == {"nickname": ["昵称不能为空"]}


class _TwoFieldSchema(PayloadSchema):
    display_name: str = ""
    code: str = ""

    @field_validator("display_name", "code")
    @classmethod
    def _require(cls, value: str) -> str:
        if not value:
            raise SchemaMessageKeyError("不能为空", message_key="FIELD_REQUIRED")
        return value


@pytest.mark.unit
def test_collect_field_errors_groups_every_field_in_model_order() -> None:
    with pytest.raises(PydanticValidationError) as excinfo:
        _TwoFieldSchema.model_validate({"code": "", "display_name": ""})

    errors = collect_field_errors(_TwoFieldSchema, excinfo.value)

    assert list(errors) == ["display_name", "code"]
    assert errors["code"] == ["不能为空"]
