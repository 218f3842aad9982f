"""Infrastructure Layer: database, security primitives and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Library exceptions are mapped onto core/errors.py before leaving this layer
"""
