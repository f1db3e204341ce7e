"""HTTP API for caption grouping and rendering (FastAPI)."""
