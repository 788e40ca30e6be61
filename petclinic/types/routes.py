"""路由层类型别名."""

from __future__ import annotations

from typing import TypeAlias

from flask.typing import ResponseReturnValue, RouteCallable as FlaskRouteCallable

RouteReturn: TypeAlias = ResponseReturnValue
# 与 Flask 内置 RouteCallable 对齐,用于 add_url_rule 等注册函数.
RouteCallable: TypeAlias = FlaskRouteCallable
