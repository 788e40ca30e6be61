"""宠物类型 Repository."""

from __future__ import annotations

from typing import cast

from petclinic import db
from petclinic.models.pet import PetType


class PetTypesRepository:
    """宠物类型 Repository."""

    def get_by_name(self, name: str) -> PetType | None:
        normalized = name.strip()
        if not normalized:
            return None
        return cast("PetType | None", PetType.query.filter_by(name=normalized).first())

    def list_types(self) -> list[PetType]:
        return list(PetType.query.order_by(PetType.name.asc()).all())

    def add(self, pet_type: PetType) -> PetType:
        db.session.add(pet_type)
        db.session.flush()
        return pet_type
