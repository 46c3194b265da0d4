"""REST surface: FastAPI application and route adapter."""
