"""宠物主人相关服务."""
