"""请求参数与表单 payload 的 pydantic schema."""
