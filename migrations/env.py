"""Alembic 环境脚本.

通过 `flask db ...` 执行时由 Flask-Migrate 注入应用上下文,元数据与连接串均取自 `petclinic.db`.
"""

from __future__ import annotations

import logging
from logging.config import fileConfig
from typing import TYPE_CHECKING, Any

from alembic import context
from flask import current_app

if TYPE_CHECKING:
    from alembic.runtime.environment import MigrationContext
    from sqlalchemy.engine import Engine
    from sqlalchemy.sql.schema import MetaData

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)
logger = logging.getLogger("alembic.env")

target_db = current_app.extensions["migrate"].db


def get_engine() -> Engine:
    """返回当前应用绑定的 SQLAlchemy Engine(Flask-SQLAlchemy 3)."""
    return target_db.engine


def get_engine_url() -> str:
    """生成带密码的连接串,并对 ``%`` 做 ini 转义."""
    return get_engine().url.render_as_string(hide_password=False).replace("%", "%%")


def get_metadata() -> MetaData:
    return target_db.metadata


config.set_main_option("sqlalchemy.url", get_engine_url())


def _is_sqlite() -> bool:
    return get_engine().url.get_backend_name() == "sqlite"


def run_migrations_offline() -> None:
    """以离线模式运行迁移,仅输出 SQL."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=get_metadata(),
        literal_binds=True,
        render_as_batch=_is_sqlite(),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """以在线模式运行迁移.

    自动生成时若没有任何结构变化,则不生成空的迁移脚本.
    """

    def process_revision_directives(
        _context: MigrationContext,
        _revision: tuple[str, str] | str | None,
        directives: list[Any],
    ) -> None:
        if getattr(config.cmd_opts, "autogenerate", False):
            script = directives[0]
            if script.upgrade_ops.is_empty():
                directives[:] = []
                logger.info("未检测到结构变化,跳过生成迁移脚本")

    conf_args = dict(current_app.extensions["migrate"].configure_args)
    conf_args.setdefault("process_revision_directives", process_revision_directives)
    conf_args.setdefault("compare_type", True)
    conf_args.setdefault("render_as_batch", _is_sqlite())

    with get_engine().connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=get_metadata(),
            **conf_args,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
