"""HTTP API — FastAPI application, routes, schemas."""
