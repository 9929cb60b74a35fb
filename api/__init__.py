"""
Fixture Comment API (FastAPI)

Stub server the client integration tests talk to:
- GET /         - List comments
- POST /        - Create a comment (id assigned by the server)
- PUT /?id=N    - Update a comment (no body returned)
- GET /health   - Health check

Usage:
    uvicorn api.app:app --reload
"""

__version__ = "0.1.0"
