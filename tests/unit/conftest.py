# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供环境隔离与 Flask 应用相关的通用 fixtures。
"""

import pytest

from petclinic import create_app, db
from petclinic.settings import Settings


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    目标:
    - unit tests 只使用内存 SQLite, 不依赖外部数据库
    - 避免开发者本机环境变量影响测试稳定性
    """
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("WTF_CSRF_ENABLED", "false")
    monkeypatch.delenv("SEED_DEMO_DATA", raising=False)
    monkeypatch.delenv("TRUSTED_PROXY_COUNT", raising=False)


@pytest.fixture(scope="function")
def app():
    """创建带空表结构的测试应用实例."""
    settings = Settings.load()
    app = create_app(settings=settings)
    app.config["TESTING"] = True
    with app.app_context():
        db.create_all()
    return app
