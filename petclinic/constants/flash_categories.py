"""Flash 消息类别.

类别名直接写入 session,模板通过 ``flash_bootstrap_class`` 映射为 alert 样式.
"""

from __future__ import annotations

from typing import ClassVar


class FlashCategory:
    """Flash 消息类别常量."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    _ALERT_CLASSES: ClassVar[dict[str, str]] = {
        SUCCESS: "alert-success",
        ERROR: "alert-danger",
        WARNING: "alert-warning",
    }

    @classmethod
    def get_bootstrap_class(cls, category: str) -> str:
        """返回类别对应的 Bootstrap alert 样式,未知类别按 info 处理."""
        return cls._ALERT_CLASSES.get(category, "alert-info")
