"""演示数据写入脚本.

建表(可选)并在宠物主人表为空时写入固定的演示数据;已有数据时不做任何修改.
"""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from petclinic import create_app, db
from petclinic.errors import AppError
from petclinic.services.owners.demo_data_service import OwnerDemoDataService
from petclinic.utils.structlog_config import get_system_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="写入宠物诊所演示数据(宠物主人表为空时).")
    parser.add_argument("--create-tables", action="store_true", help="写入前执行 db.create_all(),适用于未运行迁移的本地库")
    return parser


def main() -> int:
    args = _build_parser().parse_args()
    logger = get_system_logger()

    app = create_app()
    with app.app_context():
        try:
            if args.create_tables:
                db.create_all()
            outcome = OwnerDemoDataService().seed()
            db.session.commit()
        except (AppError, SQLAlchemyError) as exc:
            db.session.rollback()
            logger.exception("演示数据写入失败", module="demo_data_script", error=str(exc))
            return 1

    if outcome.skipped:
        logger.info("已存在宠物主人,未写入演示数据", module="demo_data_script")
    else:
        logger.info(
            "演示数据写入完成",
            module="demo_data_script",
            pet_types_created=outcome.pet_types_created,
            owners_created=outcome.owners_created,
            pets_created=outcome.pets_created,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
