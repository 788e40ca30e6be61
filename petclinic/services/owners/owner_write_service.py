"""宠物主人写操作 Service.

职责:
- 处理宠物主人的创建/更新编排
- 负责表单绑定、校验与数据规范化
- 调用 repository 执行 add/flush
- 不返回 Response、不 commit
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from petclinic.constants.system_constants import ErrorMessages
from petclinic.errors import DatabaseError, FormValidationError, NotFoundError
from petclinic.models.owner import Owner
from petclinic.repositories.owners_repository import OwnersRepository
from petclinic.schemas.owners import OwnerFormPayload, bind_owner_form
from petclinic.utils.structlog_config import log_info

if TYPE_CHECKING:
    from collections.abc import Mapping

    from petclinic.types import OwnerRepository


class OwnerWriteService:
    """宠物主人写操作服务."""

    def __init__(self, repository: OwnerRepository | None = None) -> None:
        """初始化写操作服务."""
        self._repository = repository or OwnersRepository()

    def create(self, payload: Mapping[str, object]) -> Owner:
        """创建宠物主人.

        Args:
            payload: 原始表单参数.

        Returns:
            已分配 ID 的宠物主人.

        Raises:
            FormValidationError: 任一字段校验失败时抛出,携带全部字段错误.
            DatabaseError: 写入数据库失败时抛出.

        """
        values = self._bind(payload, owner_id=None)
        owner = Owner(
            first_name=values.first_name,
            last_name=values.last_name,
            address=values.address,
            city=values.city,
            telephone=values.telephone,
        )
        self._save(owner)
        self._log_create(owner)
        return owner

    def update(self, owner_id: int, payload: Mapping[str, object]) -> Owner:
        """更新宠物主人,ID 保持不变.

        校验失败时不会修改已有对象.

        Raises:
            NotFoundError: 宠物主人不存在时抛出.
            FormValidationError: 任一字段校验失败时抛出.

        """
        owner = self._repository.get_by_id(owner_id)
        if owner is None:
            raise NotFoundError(
                ErrorMessages.OWNER_NOT_FOUND,
                message_key="OWNER_NOT_FOUND",
                extra={"owner_id": owner_id},
            )

        values = self._bind(payload, owner_id=owner_id)
        self._assign(owner, values)
        self._save(owner)
        self._log_update(owner)
        return owner

    @staticmethod
    def _bind(payload: Mapping[str, object], *, owner_id: int | None) -> OwnerFormPayload:
        binding = bind_owner_form(payload, owner_id=owner_id)
        if binding.values is None:
            raise FormValidationError(binding.errors, form=binding.form)
        return binding.values

    def _save(self, owner: Owner) -> None:
        try:
            self._repository.save(owner)
        except SQLAlchemyError as exc:
            raise DatabaseError(
                ErrorMessages.OWNER_SAVE_FAILED,
                message_key="OWNER_SAVE_FAILED",
                extra={"exception": str(exc)},
            ) from exc

    @staticmethod
    def _assign(owner: Owner, values: OwnerFormPayload) -> None:
        owner.first_name = values.first_name
        owner.last_name = values.last_name
        owner.address = values.address
        owner.city = values.city
        owner.telephone = values.telephone

    @staticmethod
    def _log_create(owner: Owner) -> None:
        log_info(
            "宠物主人创建成功",
            module="owners",
            owner_id=owner.id,
            last_name=owner.last_name,
            city=owner.city,
        )

    @staticmethod
    def _log_update(owner: Owner) -> None:
        log_info(
            "宠物主人更新成功",
            module="owners",
            owner_id=owner.id,
            last_name=owner.last_name,
            city=owner.city,
        )
