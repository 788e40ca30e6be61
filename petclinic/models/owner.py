"""宠物诊所 - 宠物主人模型."""

from __future__ import annotations

from petclinic import db
from petclinic.constants.validation_limits import (
    OWNER_ADDRESS_MAX_LENGTH,
    OWNER_CITY_MAX_LENGTH,
    OWNER_NAME_MAX_LENGTH,
    TELEPHONE_COLUMN_LENGTH,
)
from petclinic.utils.time_utils import time_utils


class Owner(db.Model):
    """宠物主人模型.

    Attributes:
        id: 主键,持久化前为 None.
        first_name: 名.
        last_name: 姓,按姓查找时建有索引.
        address: 地址.
        city: 城市.
        telephone: 电话号码,仅包含数字.
        created_at: 创建时间.
        updated_at: 更新时间.
        pets: 名下宠物,按名称排序.

    """

    __tablename__ = "owners"

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(OWNER_NAME_MAX_LENGTH), nullable=False)
    last_name = db.Column(db.String(OWNER_NAME_MAX_LENGTH), nullable=False, index=True)
    address = db.Column(db.String(OWNER_ADDRESS_MAX_LENGTH), nullable=False)
    city = db.Column(db.String(OWNER_CITY_MAX_LENGTH), nullable=False)
    telephone = db.Column(db.String(TELEPHONE_COLUMN_LENGTH), nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=time_utils.now)
    updated_at = db.Column(db.DateTime(timezone=True), default=time_utils.now, onupdate=time_utils.now)

    pets = db.relationship(
        "Pet",
        back_populates="owner",
        order_by="Pet.name",
        cascade="all, delete-orphan",
    )

    def __init__(
        self,
        first_name: str = "",
        last_name: str = "",
        address: str = "",
        city: str = "",
        telephone: str = "",
        owner_id: int | None = None,
    ) -> None:
        """初始化宠物主人.

        Args:
            first_name: 名.
            last_name: 姓.
            address: 地址.
            city: 城市.
            telephone: 电话号码.
            owner_id: 显式指定的主键,通常留空由数据库分配.

        """
        self.id = owner_id
        self.first_name = first_name
        self.last_name = last_name
        self.address = address
        self.city = city
        self.telephone = telephone

    @property
    def full_name(self) -> str:
        """返回 "名 姓" 形式的全名."""
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_new(self) -> bool:
        """尚未持久化时为 True."""
        return self.id is None

    def to_dict(self) -> dict[str, object]:
        """转换为字典格式.

        Returns:
            包含宠物主人基础信息及宠物列表的字典.

        """
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "address": self.address,
            "city": self.city,
            "telephone": self.telephone,
            "pets": [pet.to_dict() for pet in self.pets],
        }

    def __repr__(self) -> str:
        return f"<Owner {self.id} {self.full_name}>"
