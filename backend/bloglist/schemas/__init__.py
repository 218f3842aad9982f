"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Response schemas never expose password_hash

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
