"""Services Layer: DB-backed operations around the pure checks in core/.

Invariants:
    - One service class per resource, constructed per request with an AsyncSession
    - Services raise core/errors.py exceptions; routes never build error bodies
"""
