"""API Layer: FastAPI routes, request identity, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies (DELETE success returns an empty 200)

Design Decisions:
    - Thin routes delegate to services
"""
