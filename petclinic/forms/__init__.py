"""表单定义与表单处理器."""
