"""宠物诊所 - 常量定义模块

统一管理错误分类、严重度与用户可见文案.
"""

from enum import Enum


class ErrorCategory(Enum):
    """错误分类枚举."""

    VALIDATION = "validation"
    BUSINESS = "business"
    SECURITY = "security"
    DATABASE = "database"
    SYSTEM = "system"
    UNKNOWN = "unknown"


class ErrorSeverity(Enum):
    """错误严重程度枚举."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# 错误消息常量
class ErrorMessages:
    """错误消息常量."""

    # 通用错误
    INTERNAL_ERROR = "服务器内部错误"
    VALIDATION_ERROR = "数据验证失败"
    RESOURCE_NOT_FOUND = "资源不存在"
    INVALID_REQUEST = "无效的请求"

    # 数据库错误
    DATABASE_QUERY_ERROR = "数据库查询错误"
    DATABASE_TIMEOUT = "数据库操作超时"

    # 表单字段错误
    FIELD_REQUIRED = "不能为空"
    FIELD_TOO_LONG = "长度不能超过 {max_length} 个字符"
    TELEPHONE_INVALID = "电话号码必须为数字且不超过 {max_digits} 位"

    # 业务错误
    OWNER_NOT_FOUND = "宠物主人不存在"
    OWNER_SEARCH_NOT_FOUND = "未找到匹配的宠物主人"
    OWNER_SAVE_FAILED = "宠物主人保存失败"


# 成功消息常量
class SuccessMessages:
    """成功消息常量."""

    OPERATION_SUCCESS = "操作成功"
    OWNER_CREATED = "宠物主人创建成功"
    OWNER_UPDATED = "宠物主人信息已更新"


__all__ = [
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "SuccessMessages",
]
