"""Schema 基础设施."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PayloadSchema(BaseModel):
    """写路径 payload 的基础 schema.

    约定:
    - 默认忽略未知字段, 以兼容表单中的 csrf_token 等额外字段.
    - 字段使用 HTTP 表单字段名作为 alias, 同时允许按属性名构造.
    - schema 负责业务校验与错误文案(中文).
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, str_strip_whitespace=True)


class QuerySchema(BaseModel):
    """读路径 query 参数的基础 schema."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, str_strip_whitespace=True)
