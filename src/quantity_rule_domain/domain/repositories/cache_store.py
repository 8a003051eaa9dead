# src/quantity_rule_domain/domain/repositories/cache_store.py
"""Expiring cache store interface."""
from abc import ABC, abstractmethod
from typing import Any, Optional


class ICacheStore(ABC):

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Returns the cached value, or None on a miss or after expiry."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl: int) -> None:
        """Stores value under key for ttl seconds, overwriting any previous entry."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Drops the entry under key if there is one."""
        pass

    @abstractmethod
    def delete_prefix(self, prefix: str) -> int:
        """Drops every entry whose key starts with prefix and returns how many were dropped."""
        pass
