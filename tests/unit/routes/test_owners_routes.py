import pytest

from petclinic import db
from petclinic.models.owner import Owner
from petclinic.types import OwnerForm, OwnerSearchForm

FORM_TEMPLATE = "owners/createOrUpdateOwnerForm.html"
FIND_TEMPLATE = "owners/findOwners.html"
LIST_TEMPLATE = "owners/ownersList.html"
DETAIL_TEMPLATE = "owners/ownerDetails.html"

VALID_OWNER = {
    "firstName": "Joe",
    "lastName": "Bloggs",
    "address": "123 Caramel Street",
    "city": "London",
    "telephone": "01316761638",
}


def _last_render(rendered_templates):
    assert rendered_templates, "没有渲染任何模板"
    return rendered_templates[-1]


def _owner_count(app) -> int:
    with app.app_context():
        return Owner.query.count()


@pytest.mark.unit
def test_init_creation_form_renders_empty_owner(client, rendered_templates) -> None:
    response = client.get("/owners/new")

    assert response.status_code == 200
    template, context = _last_render(rendered_templates)
    assert template == FORM_TEMPLATE
    owner = context["owner"]
    assert isinstance(owner, OwnerForm)
    assert owner.is_new
    assert not owner.has_errors


@pytest.mark.unit
def test_process_creation_form_success_redirects_to_new_owner(client, seeded_app) -> None:
    response = client.post("/owners/new", data=VALID_OWNER)

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/owners/4")
    with seeded_app.app_context():
        created = db.session.get(Owner, 4)
        assert created is not None
        assert created.last_name == "Bloggs"
        assert created.telephone == "01316761638"


@pytest.mark.unit
def test_process_creation_form_has_errors_on_missing_fields(client, seeded_app, rendered_templates) -> None:
    response = client.post(
        "/owners/new",
        data={"firstName": "Joe", "lastName": "Bloggs", "city": "London"},
    )

    assert response.status_code == 200
    template, context = _last_render(rendered_templates)
    assert template == FORM_TEMPLATE
    owner = context["owner"]
    assert owner.has_errors
    assert set(owner.errors) == {"address", "telephone"}
    assert owner.first_name == "Joe"
    assert owner.city == "London"
    assert _owner_count(seeded_app) == 3


@pytest.mark.unit
def test_process_creation_form_reports_every_missing_field(client, rendered_templates) -> None:
    response = client.post("/owners/new", data={})

    assert response.status_code == 200
    _, context = _last_render(rendered_templates)
    assert set(context["owner"].errors) == {"firstName", "lastName", "address", "city", "telephone"}


@pytest.mark.unit
def test_process_creation_form_rejects_non_numeric_telephone(client, seeded_app, rendered_templates) -> None:
    response = client.post("/owners/new", data={**VALID_OWNER, "telephone": "555-0100"})

    assert response.status_code == 200
    _, context = _last_render(rendered_templates)
    assert set(context["owner"].errors) == {"telephone"}
    assert _owner_count(seeded_app) == 3


@pytest.mark.unit
def test_process_creation_form_rejects_telephone_longer_than_column(
    client,
    seeded_app,
    rendered_templates,
) -> None:
    response = client.post("/owners/new", data={**VALID_OWNER, "telephone": "0" * 30 + "6085551023"})

    assert response.status_code == 200
    _, context = _last_render(rendered_templates)
    assert set(context["owner"].errors) == {"telephone"}
    assert _owner_count(seeded_app) == 3


@pytest.mark.unit
def test_init_find_form(client, rendered_templates) -> None:
    response = client.get("/owners/find")

    assert response.status_code == 200
    template, context = _last_render(rendered_templates)
    assert template == FIND_TEMPLATE
    assert isinstance(context["owner"], OwnerSearchForm)
    assert not context["owner"].has_errors


@pytest.mark.unit
def test_process_find_form_without_criteria_lists_every_owner(client, rendered_templates) -> None:
    response = client.get("/owners")

    assert response.status_code == 200
    template, context = _last_render(rendered_templates)
    assert template == LIST_TEMPLATE
    assert [owner["id"] for owner in context["selections"]] == [2, 3, 1]


@pytest.mark.unit
@pytest.mark.parametrize(
    "params",
    [
        {"lastName": "Franklin", "firstName": "George"},
        {"lastName": "Franklin", "firstName": ""},
        {"lastName": "", "firstName": "George"},
        {"lastName": "franklin"},
        {"lastName": "Frank"},
    ],
)
def test_process_find_form_single_match_redirects_to_owner(client, params) -> None:
    response = client.get("/owners", query_string=params)

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/owners/1")


@pytest.mark.unit
@pytest.mark.parametrize(
    "params",
    [
        {"lastName": "Estaban", "firstName": "Maria"},
        {"lastName": "Estaban", "firstName": ""},
        {"lastName": "", "firstName": "Maria"},
    ],
)
def test_process_find_form_multiple_matches_renders_list(client, rendered_templates, params) -> None:
    response = client.get("/owners", query_string=params)

    assert response.status_code == 200
    template, context = _last_render(rendered_templates)
    assert template == LIST_TEMPLATE
    assert [owner["id"] for owner in context["selections"]] == [2, 3]


@pytest.mark.unit
def test_process_find_form_no_match_shows_error_on_last_name(client, rendered_templates) -> None:
    response = client.get(
        "/owners",
        query_string={"lastName": "Unknown last name", "firstName": "Unknown first name"},
    )

    assert response.status_code == 200
    assert "Location" not in response.headers
    template, context = _last_render(rendered_templates)
    assert template == FIND_TEMPLATE
    form = context["owner"]
    assert list(form.errors) == ["lastName"]
    assert form.last_name == "Unknown last name"


@pytest.mark.unit
def test_process_find_form_treats_wildcards_literally(client, rendered_templates) -> None:
    response = client.get("/owners", query_string={"lastName": "%"})

    assert response.status_code == 200
    template, _ = _last_render(rendered_templates)
    assert template == FIND_TEMPLATE


@pytest.mark.unit
def test_init_update_owner_form_prefills_owner(client, rendered_templates) -> None:
    response = client.get("/owners/1/edit")

    assert response.status_code == 200
    template, context = _last_render(rendered_templates)
    assert template == FORM_TEMPLATE
    owner = context["owner"]
    assert owner.id == 1
    assert owner.last_name == "Franklin"
    assert owner.first_name == "George"
    assert owner.address == "110 W. Liberty St."
    assert owner.city == "Madison"
    assert owner.telephone == "6085551023"
    assert not owner.is_new


@pytest.mark.unit
def test_process_update_owner_form_success_keeps_id(client, seeded_app) -> None:
    response = client.post("/owners/1/edit", data={**VALID_OWNER, "telephone": "01616291589"})

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/owners/1")
    with seeded_app.app_context():
        updated = db.session.get(Owner, 1)
        assert updated.last_name == "Bloggs"
        assert updated.telephone == "01616291589"
        assert Owner.query.count() == 3


@pytest.mark.unit
def test_process_update_owner_form_has_errors_leaves_owner_unchanged(client, seeded_app, rendered_templates) -> None:
    response = client.post(
        "/owners/1/edit",
        data={"firstName": "Joe", "lastName": "Bloggs", "city": "London"},
    )

    assert response.status_code == 200
    template, context = _last_render(rendered_templates)
    assert template == FORM_TEMPLATE
    assert set(context["owner"].errors) == {"address", "telephone"}
    assert context["owner"].id == 1
    with seeded_app.app_context():
        assert db.session.get(Owner, 1).last_name == "Franklin"


@pytest.mark.unit
def test_show_owner(client, rendered_templates) -> None:
    response = client.get("/owners/1")

    assert response.status_code == 200
    template, context = _last_render(rendered_templates)
    assert template == DETAIL_TEMPLATE
    owner = context["owner"]
    assert owner["last_name"] == "Franklin"
    assert owner["first_name"] == "George"
    assert owner["address"] == "110 W. Liberty St."
    assert owner["city"] == "Madison"
    assert owner["telephone"] == "6085551023"
    assert "George Franklin".encode() in response.data


@pytest.mark.unit
@pytest.mark.parametrize("path", ["/owners/999", "/owners/999/edit"])
def test_unknown_owner_returns_not_found_envelope(client, path) -> None:
    response = client.get(path)

    assert response.status_code == 404
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["message_code"] == "OWNER_NOT_FOUND"


@pytest.mark.unit
def test_successful_create_flashes_message_on_detail_page(client) -> None:
    response = client.post("/owners/new", data=VALID_OWNER, follow_redirects=True)

    assert response.status_code == 200
    assert "宠物主人创建成功".encode() in response.data
    assert b"Joe Bloggs" in response.data
