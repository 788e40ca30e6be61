"""宠物主人相关类型定义."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from petclinic.models.owner import Owner
    from petclinic.types.structures import FieldErrors


class OwnerRepository(Protocol):
    """宠物主人持久化访问协议.

    SQLAlchemy 实现与内存实现都遵循该协议,服务层只依赖协议本身.
    """

    def get_by_id(self, owner_id: int) -> Owner | None: ...

    def find_by_full_name(self, last_name: str, first_name: str) -> list[Owner]: ...

    def save(self, owner: Owner) -> Owner: ...


@dataclass(slots=True)
class OwnerSearchFilters:
    """按姓名查找的条件,空字符串表示该字段不过滤."""

    last_name: str = ""
    first_name: str = ""


class OwnerSearchKind(str, Enum):
    """查找结果的基数分类."""

    NOT_FOUND = "not_found"
    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(slots=True)
class OwnerSearchOutcome:
    """查找宠物主人的结果."""

    filters: OwnerSearchFilters
    owners: Sequence[Owner] = ()

    @property
    def kind(self) -> OwnerSearchKind:
        if not self.owners:
            return OwnerSearchKind.NOT_FOUND
        if len(self.owners) == 1:
            return OwnerSearchKind.SINGLE
        return OwnerSearchKind.MULTIPLE

    @property
    def single(self) -> Owner:
        if self.kind is not OwnerSearchKind.SINGLE:
            msg = "查找结果不是唯一匹配"
            raise RuntimeError(msg)
        return self.owners[0]


@dataclass(slots=True)
class OwnerForm:
    """表单绑定结果,保存原始提交值以便回显.

    Attributes:
        first_name: 名.
        last_name: 姓.
        address: 地址.
        city: 城市.
        telephone: 电话.
        id: 编辑场景下的宠物主人 ID,创建时为 None.
        errors: 表单字段名 -> 错误文案列表.

    """

    first_name: str = ""
    last_name: str = ""
    address: str = ""
    city: str = ""
    telephone: str = ""
    id: int | None = None
    errors: FieldErrors = field(default_factory=dict)

    @property
    def is_new(self) -> bool:
        return self.id is None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def field_errors(self, field_name: str) -> list[str]:
        return self.errors.get(field_name, [])

    @classmethod
    def from_owner(cls, owner: Owner) -> OwnerForm:
        return cls(
            first_name=owner.first_name or "",
            last_name=owner.last_name or "",
            address=owner.address or "",
            city=owner.city or "",
            telephone=owner.telephone or "",
            id=owner.id,
        )


@dataclass(slots=True)
class OwnerSearchForm:
    """查找表单的回显对象."""

    last_name: str = ""
    first_name: str = ""
    errors: FieldErrors = field(default_factory=dict)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def field_errors(self, field_name: str) -> list[str]:
        return self.errors.get(field_name, [])
