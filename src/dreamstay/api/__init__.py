"""HTTP surface of the booking service (FastAPI)."""
