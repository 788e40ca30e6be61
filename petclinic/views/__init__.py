"""基于 MethodView 的表单视图."""
