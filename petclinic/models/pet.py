"""宠物诊所 - 宠物与宠物类型模型."""

from __future__ import annotations

from datetime import date

from petclinic import db
from petclinic.constants.validation_limits import PET_NAME_MAX_LENGTH, PET_TYPE_NAME_MAX_LENGTH


class PetType(db.Model):
    """宠物类型(猫、狗等)."""

    __tablename__ = "types"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(PET_TYPE_NAME_MAX_LENGTH), nullable=False, unique=True, index=True)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"<PetType {self.name}>"


class Pet(db.Model):
    """宠物模型.

    Attributes:
        id: 主键.
        name: 宠物名.
        birth_date: 出生日期,可为空.
        type_id: 宠物类型外键.
        owner_id: 宠物主人外键.

    """

    __tablename__ = "pets"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(PET_NAME_MAX_LENGTH), nullable=False, index=True)
    birth_date = db.Column(db.Date, nullable=True)
    type_id = db.Column(db.Integer, db.ForeignKey("types.id"), nullable=False)
    owner_id = db.Column(db.Integer, db.ForeignKey("owners.id", ondelete="CASCADE"), nullable=False, index=True)

    type = db.relationship("PetType", lazy="joined")
    owner = db.relationship("Owner", back_populates="pets")

    def __init__(
        self,
        name: str,
        pet_type: PetType,
        birth_date: date | None = None,
    ) -> None:
        self.name = name
        self.type = pet_type
        self.birth_date = birth_date

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "birth_date": self.birth_date.isoformat() if self.birth_date else None,
            "type": self.type.name if self.type else None,
        }

    def __repr__(self) -> str:
        return f"<Pet {self.name}>"
