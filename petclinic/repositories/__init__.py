"""Repository 层: 仅负责 Query 组装与持久化访问,不 commit."""
