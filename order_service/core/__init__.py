"""Core Layer — pure lifecycle, pagination and error policy. No IO, no DB.

Invariants:
    - No module in core/ imports from modules/, api/, infrastructure/, or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: engines in modules/ orchestrate
      IO around the pure rules defined here
"""
