# src/quantity_rule_domain/domain/repositories/quantity_rule_repository.py
"""Quantity rule repository interface."""
from abc import ABC, abstractmethod
from typing import Optional

from src.quantity_rule_domain.domain.entities.quantity_rule import QuantityRule


class IQuantityRuleRepository(ABC):

    @abstractmethod
    def rules_for_role(self, role: str) -> list[QuantityRule]:
        """Retrieves the rules whose applicable roles include role; membership may be cached, fields are current."""
        pass

    @abstractmethod
    def get_rule(self, rule_id: int) -> Optional[QuantityRule]:
        """Retrieves a single rule by id, bypassing the role cache."""
        pass

    @abstractmethod
    def invalidate(self, role: Optional[str] = None) -> None:
        """Drops the cached rule set of one role, or of every cached role."""
        pass
