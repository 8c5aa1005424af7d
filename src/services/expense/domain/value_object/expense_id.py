from dataclasses import dataclass

from services.shared.domain.value_object import UuidIdentifier


@dataclass(frozen=True)
class ExpenseId(UuidIdentifier):
    """経費ID"""
