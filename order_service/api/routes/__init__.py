"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Paths use the singular resource noun: /api/v1/order, /api/v1/invoice
    - Routes never contain business logic (delegate to engines)
"""
