"""宠物主人 Repository.

职责:
- 仅负责 Query 组装与数据库读取/写入
- 写入只做 add + flush,不 commit,事务边界由路由层的 safe_route_call 负责
"""

from __future__ import annotations

from typing import cast

from sqlalchemy.orm import selectinload
from sqlalchemy.sql.elements import ColumnElement

from petclinic import db
from petclinic.models.owner import Owner


class OwnersRepository:
    """宠物主人 Repository."""

    def get_by_id(self, owner_id: int) -> Owner | None:
        return cast("Owner | None", db.session.get(Owner, owner_id))

    def find_by_full_name(self, last_name: str, first_name: str) -> list[Owner]:
        """按姓、名前缀查找宠物主人.

        两个条件均为大小写不敏感的前缀匹配,用户输入中的 ``%``/``_`` 会被转义;
        空字符串表示该字段不参与过滤,因此两者都为空时返回全部宠物主人.

        Args:
            last_name: 姓的前缀.
            first_name: 名的前缀.

        Returns:
            按姓、名、ID 排序的宠物主人列表.

        """
        last_name_column = cast(ColumnElement[str], Owner.last_name)
        first_name_column = cast(ColumnElement[str], Owner.first_name)

        query = Owner.query.options(selectinload(Owner.pets))

        normalized_last = (last_name or "").strip()
        if normalized_last:
            query = query.filter(last_name_column.istartswith(normalized_last, autoescape=True))

        normalized_first = (first_name or "").strip()
        if normalized_first:
            query = query.filter(first_name_column.istartswith(normalized_first, autoescape=True))

        return list(query.order_by(last_name_column.asc(), first_name_column.asc(), Owner.id.asc()).all())

    def save(self, owner: Owner) -> Owner:
        db.session.add(owner)
        db.session.flush()
        return owner

    @staticmethod
    def count() -> int:
        return int(db.session.query(db.func.count(Owner.id)).scalar() or 0)
