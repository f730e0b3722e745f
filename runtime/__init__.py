"""
Runtime package for the daylog admin server.

This package contains:
- API layer (FastAPI server + log routes)
- Stores (LogStore facade over core/storage)
- Models (Pydantic request/response schemas)
"""
