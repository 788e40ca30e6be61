"""基础设施层: 事务边界、请求日志等横切关注点."""
