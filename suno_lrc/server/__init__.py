"""HTTP API server for lyric alignment (FastAPI)."""
