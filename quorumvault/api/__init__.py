"""HTTP adapter: FastAPI application exposing the vault engine."""
