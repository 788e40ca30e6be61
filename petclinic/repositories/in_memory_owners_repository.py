"""内存版宠物主人 Repository.

与 ``OwnersRepository`` 遵循同一协议与匹配规则,用于服务层单测及无数据库的演示场景.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from petclinic.models.owner import Owner


# 与 SQL lower() 一致,只折叠 ASCII 大小写
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold_ascii(value: str) -> str:
    return value.translate(_ASCII_LOWER)


def _matches_prefix(value: str | None, prefix: str) -> bool:
    if not prefix:
        return True
    return _fold_ascii(value or "").startswith(_fold_ascii(prefix))


class InMemoryOwnersRepository:
    """基于字典的宠物主人 Repository."""

    def __init__(self, owners: Iterable[Owner] | None = None) -> None:
        self._owners: dict[int, Owner] = {}
        self._next_id = 1
        for owner in owners or ():
            self.save(owner)

    def get_by_id(self, owner_id: int) -> Owner | None:
        return self._owners.get(owner_id)

    def find_by_full_name(self, last_name: str, first_name: str) -> list[Owner]:
        normalized_last = (last_name or "").strip()
        normalized_first = (first_name or "").strip()
        matches = [
            owner
            for owner in self._owners.values()
            if _matches_prefix(owner.last_name, normalized_last) and _matches_prefix(owner.first_name, normalized_first)
        ]
        return sorted(matches, key=lambda owner: (owner.last_name or "", owner.first_name or "", owner.id or 0))

    def save(self, owner: Owner) -> Owner:
        if owner.id is None:
            owner.id = self._next_id
        self._next_id = max(self._next_id, owner.id + 1)
        self._owners[owner.id] = owner
        return owner

    def count(self) -> int:
        return len(self._owners)
