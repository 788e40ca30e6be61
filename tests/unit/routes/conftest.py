# tests/unit/routes/conftest.py
"""路由测试专用 fixtures.

提供预置宠物主人的 test_client 以及模板渲染记录。
"""

import pytest
from flask import template_rendered

from petclinic import db
from petclinic.models.owner import Owner

GEORGE_ID = 1
MARIA_1_ID = 2
MARIA_2_ID = 3


def _owner(owner_id: int, first_name: str, last_name: str) -> Owner:
    return Owner(
        first_name=first_name,
        last_name=last_name,
        address="110 W. Liberty St.",
        city="Madison",
        telephone="6085551023",
        owner_id=owner_id,
    )


@pytest.fixture(scope="function")
def seeded_app(app):
    """写入 George Franklin 与两位 Maria Estaban."""
    with app.app_context():
        db.session.add_all(
            [
                _owner(GEORGE_ID, "George", "Franklin"),
                _owner(MARIA_1_ID, "Maria", "Estaban"),
                _owner(MARIA_2_ID, "Maria", "Estaban"),
            ],
        )
        db.session.commit()
    return app


@pytest.fixture(scope="function")
def client(seeded_app):
    """创建测试客户端."""
    return seeded_app.test_client()


def _snapshot(value):
    # 请求结束后 ORM 对象会过期并脱离会话, 在渲染时转成字典
    if isinstance(value, Owner):
        return value.to_dict()
    if isinstance(value, list) and value and all(isinstance(item, Owner) for item in value):
        return [item.to_dict() for item in value]
    return value


@pytest.fixture(scope="function")
def rendered_templates(seeded_app):
    """记录请求期间渲染的模板名称与上下文."""
    recorded: list[tuple[str, dict]] = []

    def _record(sender, template, context, **extra):
        del sender, extra
        recorded.append((template.name, {key: _snapshot(value) for key, value in context.items()}))

    template_rendered.connect(_record, seeded_app)
    yield recorded
    template_rendered.disconnect(_record, seeded_app)
