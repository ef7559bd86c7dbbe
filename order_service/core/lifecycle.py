"""Lifecycle Rules — generic transition table shared by every resource state machine.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - An (operation, current status) pair not listed in the table is rejected,
      including re-applying an operation whose result is already the current status
    - Rejections raise InvalidTransitionError naming the current status
    - Tables are immutable once built

Design Decisions:
    - One generic table parameterised by status/operation enums: each module
      instantiates its own, the evaluation logic exists once
    - Raise instead of returning error dicts: engines propagate rejections
      unmodified to the error translator
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Generic, Iterable, Mapping, TypeVar

from order_service.core.errors import InvalidTransitionError

StatusT = TypeVar("StatusT", bound=Enum)
OperationT = TypeVar("OperationT", bound=Enum)


@dataclass(frozen=True)
class TransitionRule(Generic[StatusT, OperationT]):
    """operation is allowed from any of `sources` and lands on `target`."""
    operation: OperationT
    sources: frozenset[StatusT]
    target: StatusT


class TransitionTable(Generic[StatusT, OperationT]):
    """Immutable lookup of allowed (operation, current status) pairs."""

    def __init__(
        self,
        resource_type: str,
        initial: StatusT,
        rules: Iterable[TransitionRule[StatusT, OperationT]],
    ):
        by_operation: dict[OperationT, TransitionRule[StatusT, OperationT]] = {}
        for rule in rules:
            if rule.operation in by_operation:
                raise ValueError(f"Duplicate rule for operation {rule.operation}")
            by_operation[rule.operation] = rule
        self.resource_type = resource_type
        self.initial = initial
        self._rules: Mapping[OperationT, TransitionRule[StatusT, OperationT]] = (
            MappingProxyType(by_operation)
        )

    def is_allowed(self, current: StatusT, operation: OperationT) -> bool:
        rule = self._rules.get(operation)
        return rule is not None and current in rule.sources

    def resolve(self, current: StatusT, operation: OperationT) -> StatusT:
        """Return the resulting status or raise InvalidTransitionError."""
        if not self.is_allowed(current, operation):
            raise InvalidTransitionError(
                self.resource_type, operation.value, current.value,
            )
        return self._rules[operation].target

    def allowed_operations(self, current: StatusT) -> list[OperationT]:
        """Operations permitted from `current`, in table declaration order."""
        return [
            op for op, rule in self._rules.items() if current in rule.sources
        ]

    def is_terminal(self, current: StatusT) -> bool:
        return not self.allowed_operations(current)


def rule(
    operation: OperationT, sources: Iterable[StatusT], target: StatusT,
) -> TransitionRule[StatusT, OperationT]:
    """Shorthand for building a TransitionRule from any iterable of sources."""
    return TransitionRule(operation, frozenset(sources), target)
