"""Global exception handling for a FastAPI web API."""
