"""表单处理器."""
