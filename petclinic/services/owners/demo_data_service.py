"""演示数据 Service.

职责:
- 在宠物主人表为空时写入一组固定的演示数据(宠物类型、宠物主人、宠物)
- 幂等: 已存在宠物主人时直接跳过
- 只做 add/flush,不 commit
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from sqlalchemy.exc import SQLAlchemyError

from petclinic.errors import DatabaseError
from petclinic.models.owner import Owner
from petclinic.models.pet import Pet, PetType
from petclinic.repositories.owners_repository import OwnersRepository
from petclinic.repositories.pet_types_repository import PetTypesRepository
from petclinic.utils.structlog_config import log_info

DEMO_PET_TYPES: tuple[str, ...] = ("cat", "dog", "lizard", "snake", "bird", "hamster")

# (名, 姓, 地址, 城市, 电话, ((宠物名, 出生日期, 类型), ...))
DEMO_OWNERS: tuple[tuple[str, str, str, str, str, tuple[tuple[str, date, str], ...]], ...] = (
    ("George", "Franklin", "110 W. Liberty St.", "Madison", "6085551023", (("Leo", date(2010, 9, 7), "cat"),)),
    ("Betty", "Davis", "638 Cardinal Ave.", "Sun Prairie", "6085551749", (("Basil", date(2012, 8, 6), "hamster"),)),
    (
        "Eduardo",
        "Rodriquez",
        "2693 Commerce St.",
        "McFarland",
        "6085558763",
        (("Rosy", date(2011, 4, 17), "dog"), ("Jewel", date(2010, 3, 7), "dog")),
    ),
    ("Harold", "Davis", "563 Friendly St.", "Windsor", "6085553198", (("Iggy", date(2010, 11, 30), "lizard"),)),
    ("Peter", "McTavish", "2387 S. Fair Way", "Madison", "6085552765", (("George", date(2010, 1, 20), "snake"),)),
    (
        "Jean",
        "Coleman",
        "105 N. Lake St.",
        "Monona",
        "6085552654",
        (("Samantha", date(2012, 9, 4), "cat"), ("Max", date(2012, 9, 4), "cat")),
    ),
    ("Jeff", "Black", "1450 Oak Blvd.", "Monona", "6085555387", (("Lucky", date(2011, 8, 6), "bird"),)),
    ("Maria", "Escobito", "345 Maple St.", "Madison", "6085557683", (("Mulligan", date(2007, 2, 24), "dog"),)),
    ("David", "Schroeder", "2749 Blackhawk Trail", "Madison", "6085559435", (("Freddy", date(2010, 3, 9), "bird"),)),
    (
        "Carlos",
        "Estaban",
        "2335 Independence La.",
        "Waunakee",
        "6085555487",
        (("Lucky", date(2010, 6, 24), "dog"), ("Sly", date(2012, 6, 8), "cat")),
    ),
)


@dataclass(slots=True)
class DemoDataSeedOutcome:
    """演示数据写入结果."""

    skipped: bool
    pet_types_created: int = 0
    owners_created: int = 0
    pets_created: int = 0


class OwnerDemoDataService:
    """演示数据写入服务."""

    def __init__(
        self,
        owners_repository: OwnersRepository | None = None,
        pet_types_repository: PetTypesRepository | None = None,
    ) -> None:
        self._owners_repository = owners_repository or OwnersRepository()
        self._pet_types_repository = pet_types_repository or PetTypesRepository()

    def seed(self) -> DemoDataSeedOutcome:
        """写入演示数据.

        Returns:
            写入结果;已有宠物主人时 ``skipped`` 为 True 且不写入任何数据.

        Raises:
            DatabaseError: 写入失败时抛出.

        """
        if self._owners_repository.count() > 0:
            log_info("已存在宠物主人,跳过演示数据写入", module="demo_data")
            return DemoDataSeedOutcome(skipped=True)

        try:
            pet_types, types_created = self._ensure_pet_types()
            owners_created = 0
            pets_created = 0
            for first_name, last_name, address, city, telephone, pets in DEMO_OWNERS:
                owner = Owner(
                    first_name=first_name,
                    last_name=last_name,
                    address=address,
                    city=city,
                    telephone=telephone,
                )
                for pet_name, birth_date, type_name in pets:
                    owner.pets.append(Pet(name=pet_name, pet_type=pet_types[type_name], birth_date=birth_date))
                    pets_created += 1
                self._owners_repository.save(owner)
                owners_created += 1
        except SQLAlchemyError as exc:
            raise DatabaseError("演示数据写入失败", extra={"exception": str(exc)}) from exc

        outcome = DemoDataSeedOutcome(
            skipped=False,
            pet_types_created=types_created,
            owners_created=owners_created,
            pets_created=pets_created,
        )
        log_info(
            "演示数据写入完成",
            module="demo_data",
            pet_types_created=outcome.pet_types_created,
            owners_created=outcome.owners_created,
            pets_created=outcome.pets_created,
        )
        return outcome

    def _ensure_pet_types(self) -> tuple[dict[str, PetType], int]:
        pet_types: dict[str, PetType] = {}
        created = 0
        for name in DEMO_PET_TYPES:
            pet_type = self._pet_types_repository.get_by_name(name)
            if pet_type is None:
                pet_type = self._pet_types_repository.add(PetType(name=name))
                created += 1
            pet_types[name] = pet_type
        return pet_types, created
