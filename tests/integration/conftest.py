"""集成测试 fixtures.

需要一个专用的真实数据库: 通过 ``INTEGRATION_DATABASE_URL`` 指定,
每个用例结束后会清空 owners/pets/types 三张表.
"""

import os

import pytest

INTEGRATION_DATABASE_URL = os.environ.get("INTEGRATION_DATABASE_URL", "")

if not INTEGRATION_DATABASE_URL or INTEGRATION_DATABASE_URL.startswith("sqlite"):
    pytest.skip(
        "集成测试需要专用的真实数据库,请设置 INTEGRATION_DATABASE_URL",
        allow_module_level=True,
    )

from petclinic import create_app, db
from petclinic.settings import Settings


@pytest.fixture(scope="session")
def app():
    settings = Settings(FLASK_ENV="testing", DATABASE_URL=INTEGRATION_DATABASE_URL, WTF_CSRF_ENABLED=False)
    app = create_app(settings=settings)
    with app.app_context():
        db.create_all()
    return app


def _truncate_tables() -> None:
    for table in reversed(db.metadata.sorted_tables):
        db.session.execute(table.delete())
    db.session.commit()


@pytest.fixture
def client(app):
    yield app.test_client()
    with app.app_context():
        _truncate_tables()
