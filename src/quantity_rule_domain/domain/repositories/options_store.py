# src/quantity_rule_domain/domain/repositories/options_store.py
"""Key/value options store interface."""
from abc import ABC, abstractmethod
from typing import Any, Optional


class IOptionsStore(ABC):

    @abstractmethod
    def get(self, key: str) -> Optional[dict[str, Any]]:
        """Retrieves the option record stored under key, or None if absent."""
        pass

    @abstractmethod
    def set(self, key: str, record: dict[str, Any]) -> None:
        """Saves or replaces the option record stored under key."""
        pass
