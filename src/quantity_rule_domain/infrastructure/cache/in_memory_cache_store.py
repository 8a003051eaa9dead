# src/quantity_rule_domain/infrastructure/cache/in_memory_cache_store.py
"""Process-local cache store with per-entry expiry."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from src.common.utils.date_utils import expires_at, is_expired, utc_now
from src.quantity_rule_domain.domain.repositories.cache_store import ICacheStore

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    value: Any
    expires_at: datetime


class InMemoryCacheStore(ICacheStore):
    """
    Keeps values in a dict until their UTC expiry passes.

    Expired entries are dropped lazily on read. The clock is injectable so
    expiry can be exercised without waiting.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None

        if is_expired(entry.expires_at, now=self._clock()):
            logger.debug(f"Cache entry '{key}' expired")
            del self._entries[key]
            return None

        return entry.value

    def set(self, key: str, value: Any, ttl: int) -> None:
        self._entries[key] = CacheEntry(value=value, expires_at=expires_at(ttl, now=self._clock()))

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def delete_prefix(self, prefix: str) -> int:
        keys = [key for key in self._entries if key.startswith(prefix)]
        for key in keys:
            del self._entries[key]
        return len(keys)

    def __len__(self) -> int:
        return len(self._entries)
