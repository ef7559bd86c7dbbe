"""Feature Modules — one package per resource, each owning its lifecycle engine.

Invariants:
    - A module package exports ONLY its engine, engine factory, contract types and enums
    - Records (models.py), gateways (repository.py) and mappers (mapper.py) are
      never imported from outside their own package
    - Cross-module collaboration goes engine -> engine through a narrow Protocol
      declared by the consumer

Design Decisions:
    - Boundary enforced by tests/test_module_boundaries.py at review time
      (Python has no unexported types)
"""
