"""HTTP头常量.

定义常用的HTTP头名称，避免魔法字符串。
"""


class HttpHeaders:
    """HTTP头常量."""

    CONTENT_TYPE = "Content-Type"
    LOCATION = "Location"
    USER_AGENT = "User-Agent"

    # 代理相关
    X_FORWARDED_PROTO = "X-Forwarded-Proto"

    # 请求追踪
    X_REQUEST_ID = "X-Request-ID"

    # CSRF保护
    X_CSRF_TOKEN = "X-CSRFToken"
