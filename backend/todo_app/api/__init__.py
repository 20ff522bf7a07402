"""API Layer — FastAPI routers, request dependencies and global error handlers."""
