import pytest
from werkzeug.exceptions import NotFound

from petclinic import db
from petclinic.errors import DatabaseError, NotFoundError, SystemError
from petclinic.infra import route_safety
from petclinic.models.owner import Owner


def _new_owner() -> Owner:
    return Owner("Joe", "Bloggs", "123 Caramel Street", "London", "1316761638")


@pytest.fixture
def captured_logs(monkeypatch):
    records: list[tuple[str, str, dict]] = []

    class _Logger:
        def __getattr__(self, level):
            def _log(event, **kwargs):
                records.append((level, event, kwargs))

            return _log

    monkeypatch.setattr(route_safety, "get_logger", lambda _name: _Logger())
    return records


@pytest.mark.unit
def test_safe_route_call_commits_on_success(app) -> None:
    with app.app_context():

        def _execute() -> int:
            owner = _new_owner()
            db.session.add(owner)
            db.session.flush()
            return owner.id

        owner_id = route_safety.safe_route_call(
            _execute,
            module="test",
            action="create_owner",
            public_error="保存失败",
        )
        db.session.rollback()

        assert db.session.get(Owner, owner_id) is not None


@pytest.mark.unit
def test_safe_route_call_rolls_back_and_reraises_app_errors(app, captured_logs) -> None:
    with app.app_context():

        def _execute() -> None:
            db.session.add(_new_owner())
            db.session.flush()
            raise NotFoundError("宠物主人不存在", message_key="OWNER_NOT_FOUND")

        with pytest.raises(NotFoundError):
            route_safety.safe_route_call(
                _execute,
                module="test",
                action="create_owner",
                public_error="保存失败",
                context={"owner_id": 1},
            )

        assert Owner.query.count() == 0

    level, event, payload = captured_logs[-1]
    assert level == "warning"
    assert event == "create_owner执行失败"
    assert payload["module"] == "test"
    assert payload["owner_id"] == 1
    assert payload["error_type"] == "NotFoundError"


@pytest.mark.unit
def test_safe_route_call_passes_http_exceptions_through(app) -> None:
    def _execute() -> None:
        raise NotFound()

    with app.app_context(), pytest.raises(NotFound):
        route_safety.safe_route_call(
            _execute,
            module="test",
            action="lookup",
            public_error="查找失败",
        )


@pytest.mark.unit
def test_safe_route_call_wraps_unexpected_errors(app, captured_logs) -> None:
    def _execute() -> None:
        raise KeyError("boom")

    with app.app_context(), pytest.raises(SystemError) as excinfo:
        route_safety.safe_route_call(
            _execute,
            module="test",
            action="lookup",
            public_error="查找失败",
        )

    assert str(excinfo.value) == "查找失败"
    assert isinstance(excinfo.value.__cause__, KeyError)
    level, _, payload = captured_logs[-1]
    assert level == "error"
    assert payload["unexpected"] is True


@pytest.mark.unit
def test_safe_route_call_uses_custom_fallback_exception(app) -> None:
    def _execute() -> None:
        raise RuntimeError("disk full")

    with app.app_context(), pytest.raises(DatabaseError):
        route_safety.safe_route_call(
            _execute,
            module="test",
            action="save",
            public_error="保存失败",
            fallback_exception=DatabaseError,
        )


@pytest.mark.unit
def test_log_with_context_merges_context_and_extra(captured_logs) -> None:
    route_safety.log_with_context(
        "info",
        "表单校验未通过",
        module="resource_forms",
        action="owner_form_upsert",
        context={"resource_id": 3},
        extra={"invalid_fields": ["city"]},
    )

    assert captured_logs == [
        (
            "info",
            "表单校验未通过",
            {"module": "resource_forms", "action": "owner_form_upsert", "resource_id": 3, "invalid_fields": ["city"]},
        ),
    ]
