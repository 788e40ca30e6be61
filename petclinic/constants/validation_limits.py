"""输入校验/阈值常量.

集中管理 schema/settings 中的业务阈值, 避免 magic number 分散在各层.
"""

from __future__ import annotations

from typing import Final

# Owner(write path)
OWNER_NAME_MAX_LENGTH: Final[int] = 30
OWNER_ADDRESS_MAX_LENGTH: Final[int] = 255
OWNER_CITY_MAX_LENGTH: Final[int] = 80
TELEPHONE_MAX_DIGITS: Final[int] = 10
TELEPHONE_COLUMN_LENGTH: Final[int] = 20

# Pet
PET_NAME_MAX_LENGTH: Final[int] = 30
PET_TYPE_NAME_MAX_LENGTH: Final[int] = 80

# Settings validation constraints
LOG_BACKUP_COUNT_MIN: Final[int] = 0
