"""常量模块。

集中管理系统常量,包括错误消息、Flash 类别、HTTP 相关常量与校验阈值.

主要常量：
- ErrorMessages: 错误消息常量
- FlashCategory: Flash 消息类别
- HttpStatus: HTTP 状态码常量
- HttpHeaders: HTTP 头常量
"""

# 导入HTTP状态码常量（使用Python标准库）
from http import HTTPStatus as HttpStatus

# 导入Flash类别常量
from .flash_categories import FlashCategory

# 导入HTTP头常量
from .http_headers import HttpHeaders

# 导入所有系统常量
from .system_constants import (
    ErrorCategory,
    ErrorMessages,
    ErrorSeverity,
    SuccessMessages,
)

__all__ = [
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "FlashCategory",
    "HttpHeaders",
    "HttpStatus",
    "SuccessMessages",
]
