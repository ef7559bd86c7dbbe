"""SQLAlchemy Declarative Base — shared base class for all ORM records.

Invariants:
    - All records inherit from Base
    - Base is the single source of truth for table metadata

Design Decisions:
    - Separate file for Base: module records import it without importing each other
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Order Service ORM records."""
    pass
