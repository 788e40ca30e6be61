import pytest

from petclinic.constants.system_constants import ErrorMessages
from petclinic.schemas.owners import bind_owner_form, parse_owner_search

VALID_FORM = {
    "firstName": "George",
    "lastName": "Franklin",
    "address": "110 W. Liberty St.",
    "city": "Madison",
    "telephone": "6085551023",
}


@pytest.mark.unit
def test_bind_owner_form_accepts_valid_payload_and_strips_whitespace() -> None:
    binding = bind_owner_form({**VALID_FORM, "firstName": "  George  "})

    assert binding.is_valid
    assert binding.errors == {}
    assert binding.values is not None
    assert binding.values.first_name == "George"
    assert binding.values.last_name == "Franklin"
    assert binding.form.first_name == "George"
    assert binding.form.is_new


@pytest.mark.unit
def test_bind_owner_form_reports_every_missing_field_in_form_order() -> None:
    binding = bind_owner_form({})

    assert not binding.is_valid
    assert binding.values is None
    assert list(binding.errors) == ["firstName", "lastName", "address", "city", "telephone"]
    assert binding.errors["address"] == [ErrorMessages.FIELD_REQUIRED]
    assert binding.form.errors == binding.errors


@pytest.mark.unit
def test_bind_owner_form_treats_blank_values_as_missing() -> None:
    binding = bind_owner_form({**VALID_FORM, "city": "   ", "address": None})

    assert set(binding.errors) == {"address", "city"}


@pytest.mark.unit
def test_bind_owner_form_keeps_submitted_values_for_redisplay() -> None:
    binding = bind_owner_form({**VALID_FORM, "telephone": "call me"}, owner_id=7)

    assert set(binding.errors) == {"telephone"}
    assert binding.form.id == 7
    assert binding.form.telephone == "call me"
    assert binding.form.city == "Madison"


@pytest.mark.unit
@pytest.mark.parametrize("telephone", ["6085551023", "1", "01316761638", "0000012345"])
def test_telephone_accepts_digits_with_leading_zeros(telephone: str) -> None:
    assert bind_owner_form({**VALID_FORM, "telephone": telephone}).is_valid


@pytest.mark.unit
@pytest.mark.parametrize("telephone", ["12345678901", "608-555-1023", "+441316761638", "60855510a3"])
def test_telephone_rejects_non_digits_and_too_many_digits(telephone: str) -> None:
    binding = bind_owner_form({**VALID_FORM, "telephone": telephone})

    assert list(binding.errors) == ["telephone"]
    assert binding.errors["telephone"] == [ErrorMessages.TELEPHONE_INVALID.format(max_digits=10)]


@pytest.mark.unit
def test_name_longer_than_column_is_rejected() -> None:
    binding = bind_owner_form({**VALID_FORM, "lastName": "x" * 31})

    assert binding.errors == {"lastName": [ErrorMessages.FIELD_TOO_LONG.format(max_length=30)]}


@pytest.mark.unit
@pytest.mark.parametrize("telephone", ["0" * 11 + "6085551023", "0" * 30 + "1"])
def test_telephone_longer_than_column_is_rejected(telephone: str) -> None:
    binding = bind_owner_form({**VALID_FORM, "telephone": telephone})

    assert binding.errors == {"telephone": [ErrorMessages.FIELD_TOO_LONG.format(max_length=20)]}


@pytest.mark.unit
def test_parse_owner_search_defaults_to_empty_strings() -> None:
    query = parse_owner_search({})

    assert query.last_name == ""
    assert query.first_name == ""


@pytest.mark.unit
def test_parse_owner_search_strips_values() -> None:
    query = parse_owner_search({"lastName": "  Franklin ", "firstName": " George"})

    assert query.last_name == "Franklin"
    assert query.first_name == "George"
