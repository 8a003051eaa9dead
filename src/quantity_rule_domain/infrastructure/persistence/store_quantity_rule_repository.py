# src/quantity_rule_domain/infrastructure/persistence/store_quantity_rule_repository.py
"""Quantity rule repository backed by the content store, with a per-role cache."""

import logging
from typing import Any, Optional

from src.common.config.settings import settings
from src.common.dtos.quantity_dtos import RoleCacheStatsDTO
from src.common.utils.number_utils import parse_leading_int, parse_priority, validate_number
from src.quantity_rule_domain.domain.entities.quantity_rule import QUANTITY_RULE_KIND, QuantityRule
from src.quantity_rule_domain.domain.repositories.cache_store import ICacheStore
from src.quantity_rule_domain.domain.repositories.content_store import IContentStore
from src.quantity_rule_domain.domain.repositories.quantity_rule_repository import (
    IQuantityRuleRepository,
)

logger = logging.getLogger(__name__)

ROLE_CACHE_KEY_PREFIX = "ipq_rules_"
PUBLISHED_STATUS = "publish"


class StoreQuantityRuleRepository(IQuantityRuleRepository):
    """
    Loads published quantity rules and filters them by role.

    Only the ids of a role's rules are cached, for the configured TTL (12 hours
    by default). Membership edits made while an entry is alive are not seen
    until it expires or invalidate() is called; targets, priority and values
    are always read fresh.
    """

    def __init__(self, content_store: IContentStore, cache_store: ICacheStore, ttl: int | None = None) -> None:
        self.content_store = content_store
        self.cache_store = cache_store
        self.ttl = ttl if ttl is not None else settings.IPQ_RULE_CACHE_TTL
        self.stats = RoleCacheStatsDTO()

    def rules_for_role(self, role: str) -> list[QuantityRule]:
        cache_key = self._cache_key(role)
        cached_ids = self.cache_store.get(cache_key)
        if cached_ids is not None:
            self.stats.hits += 1
            logger.debug(f"Rule cache hit for role '{role}' ({len(cached_ids)} rules)")
            return [self._load_rule(rule_id) for rule_id in cached_ids]

        self.stats.misses += 1
        rules = [rule for rule in self.load_published_rules() if rule.applies_to_role(role)]

        self.cache_store.set(cache_key, [rule.id for rule in rules], self.ttl)
        self.stats.cached_roles.add(role)
        logger.debug(f"Cached {len(rules)} rule ids for role '{role}' for {self.ttl}s")
        return rules

    def get_rule(self, rule_id: int) -> Optional[QuantityRule]:
        record = self.content_store.get_record(rule_id)
        if record is None or record.kind != QUANTITY_RULE_KIND or record.status != PUBLISHED_STATUS:
            return None
        return self._load_rule(rule_id)

    def invalidate(self, role: Optional[str] = None) -> None:
        if role is not None:
            self.cache_store.delete(self._cache_key(role))
            self.stats.cached_roles.discard(role)
            logger.info(f"Invalidated rule cache for role '{role}'")
            return

        dropped = self.cache_store.delete_prefix(ROLE_CACHE_KEY_PREFIX)
        self.stats.cached_roles.clear()
        logger.info(f"Invalidated rule cache for all roles ({dropped} entries)")

    def load_published_rules(self) -> list[QuantityRule]:
        """Reads every published rule from the content store, uncached."""
        records = self.content_store.fetch_published_records(QUANTITY_RULE_KIND)
        return [self._load_rule(record.id) for record in records]

    def _load_rule(self, rule_id: int) -> QuantityRule:
        field = self.content_store.get_field
        return QuantityRule(
            id=rule_id,
            category_ids=self._to_id_set(field(rule_id, "_cats")),
            tag_ids=self._to_id_set(field(rule_id, "_tags")),
            priority=parse_priority(field(rule_id, "_priority")),
            roles=self._to_roles(field(rule_id, "_roles")),
            min=validate_number(field(rule_id, "_min")),
            max=validate_number(field(rule_id, "_max")),
            step=validate_number(field(rule_id, "_step")),
            min_oos=validate_number(field(rule_id, "_min_oos")),
            max_oos=validate_number(field(rule_id, "_max_oos")),
        )

    @staticmethod
    def _cache_key(role: str) -> str:
        return f"{ROLE_CACHE_KEY_PREFIX}{role}"

    @staticmethod
    def _to_id_set(raw: Any) -> frozenset[int]:
        """Taxonomy ids arrive as lists of ints or numeric strings; anything else is ignored."""
        if not isinstance(raw, (list, tuple, set, frozenset)):
            return frozenset()
        ids = (parse_leading_int(item) for item in raw)
        return frozenset(term_id for term_id in ids if term_id > 0)

    @staticmethod
    def _to_roles(raw: Any) -> tuple[str, ...]:
        if isinstance(raw, str):
            return (raw,) if raw else ()
        if not isinstance(raw, (list, tuple, set, frozenset)):
            return ()
        return tuple(str(role) for role in raw if role)
