"""统一时间处理工具模块.

基于 zoneinfo 模块,提供一致的时间处理功能.
"""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

CHINA_TZ = ZoneInfo("Asia/Shanghai")


class TimeFormats:
    """时间格式常量."""

    DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
    DATE_FORMAT = "%Y-%m-%d"


class TimeUtils:
    """统一时间处理工具类."""

    @staticmethod
    def now() -> datetime:
        """获取当前 UTC 时间.

        Returns:
            带 UTC 时区信息的当前时间.

        """
        return datetime.now(UTC)

    @staticmethod
    def now_china() -> datetime:
        """获取当前中国时间."""
        return datetime.now(CHINA_TZ)

    @staticmethod
    def format_date(value: date | datetime | None, fmt: str = TimeFormats.DATE_FORMAT) -> str:
        """格式化日期,空值返回空字符串.

        Args:
            value: 日期或时间对象.
            fmt: 输出格式,默认 ``YYYY-MM-DD``.

        Returns:
            格式化后的字符串.

        """
        if value is None:
            return ""
        if isinstance(value, datetime) and value.tzinfo is not None:
            value = value.astimezone(CHINA_TZ)
        return value.strftime(fmt)


time_utils = TimeUtils()
