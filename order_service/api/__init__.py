"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes only validate input shape and delegate to module engines
    - Every failure leaves through register_error_handlers -> translate_error

Design Decisions:
    - Thin routes delegate to engines (ADR: functional core, imperative shell)
"""
