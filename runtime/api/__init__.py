"""HTTP layer: FastAPI app and log routes."""
