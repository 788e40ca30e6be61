"""宠物主人查找 Service.

职责:
- 按姓名调用 repository 查找
- 将结果按匹配数量归类为 未找到/唯一/多条,供路由层选择渲染或重定向
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from petclinic.repositories.owners_repository import OwnersRepository
from petclinic.types import OwnerSearchFilters, OwnerSearchOutcome
from petclinic.utils.structlog_config import log_info

if TYPE_CHECKING:
    from petclinic.types import OwnerRepository


class OwnerSearchService:
    """宠物主人查找服务."""

    def __init__(self, repository: OwnerRepository | None = None) -> None:
        """初始化服务并注入宠物主人仓库."""
        self._repository = repository or OwnersRepository()

    def search(self, filters: OwnerSearchFilters) -> OwnerSearchOutcome:
        """按姓、名前缀查找宠物主人.

        两个条件都为空时匹配全部宠物主人.

        Args:
            filters: 查找条件.

        Returns:
            带结果分类的查找结果.

        """
        owners = self._repository.find_by_full_name(filters.last_name, filters.first_name)
        outcome = OwnerSearchOutcome(filters=filters, owners=tuple(owners))
        log_info(
            "宠物主人查找完成",
            module="owners",
            last_name=filters.last_name,
            first_name=filters.first_name,
            outcome=outcome.kind.value,
            match_count=len(outcome.owners),
        )
        return outcome
