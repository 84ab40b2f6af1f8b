"""HTTP API layer: FastAPI app factory, routers and dependency injection."""
