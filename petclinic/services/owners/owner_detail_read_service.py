"""宠物主人详情 Service.

职责:
- 组织 repository 调用
- 不做 Query 细节、不做序列化/Response、不 commit
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from petclinic.constants.system_constants import ErrorMessages
from petclinic.errors import NotFoundError
from petclinic.repositories.owners_repository import OwnersRepository

if TYPE_CHECKING:
    from petclinic.models.owner import Owner
    from petclinic.types import OwnerRepository


class OwnerDetailReadService:
    """宠物主人详情读取服务."""

    def __init__(self, repository: OwnerRepository | None = None) -> None:
        """初始化服务并注入宠物主人仓库."""
        self._repository = repository or OwnersRepository()

    def get_owner_by_id(self, owner_id: int) -> Owner | None:
        """按 ID 获取宠物主人(可为空)."""
        return self._repository.get_by_id(owner_id)

    def get_owner_or_error(self, owner_id: int) -> Owner:
        """按 ID 获取宠物主人(不存在则抛错)."""
        owner = self.get_owner_by_id(owner_id)
        if owner is None:
            raise NotFoundError(
                ErrorMessages.OWNER_NOT_FOUND,
                message_key="OWNER_NOT_FOUND",
                extra={"owner_id": owner_id},
            )
        return owner
