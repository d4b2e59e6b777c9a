"""HTTP API (FastAPI routers and application)."""
