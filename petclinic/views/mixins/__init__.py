"""视图混入."""
