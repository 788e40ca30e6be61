"""数据模型模块.

主要模型:
- Owner: 宠物主人
- Pet: 宠物
- PetType: 宠物类型
"""

from petclinic.models.owner import Owner
from petclinic.models.pet import Pet, PetType

__all__ = ["Owner", "Pet", "PetType"]
