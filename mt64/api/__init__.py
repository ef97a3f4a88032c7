"""HTTP surface: a shared, lock-guarded generator behind FastAPI."""
