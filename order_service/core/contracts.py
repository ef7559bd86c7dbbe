"""Contract Base — shared configuration for every type that crosses a module boundary.

Invariants:
    - Contracts are immutable (frozen) value objects
    - JSON keys are camelCase; Python attributes stay snake_case
    - Unknown input keys are rejected

Design Decisions:
    - One base class over per-model ConfigDict copies: JSON casing can't drift between modules
    - populate_by_name=True: engines build contracts with snake_case kwargs, clients send camelCase
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


class ContractModel(BaseModel):
    """Base for create-request, response, page and error contracts."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


# Decimal in Python, JSON number on the wire
AsJsonNumber = PlainSerializer(float, return_type=float, when_used="json")
Money = Annotated[Decimal, AsJsonNumber]
