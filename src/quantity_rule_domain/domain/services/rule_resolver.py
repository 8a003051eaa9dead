# src/quantity_rule_domain/domain/services/rule_resolver.py
"""Decides which configuration source governs a product's quantity limits."""

import logging
from typing import Optional

from src.quantity_rule_domain.domain.entities.product import Product
from src.quantity_rule_domain.domain.entities.quantity_rule import QuantityRule
from src.quantity_rule_domain.domain.entities.resolved_source import ResolvedSource
from src.quantity_rule_domain.domain.repositories.quantity_rule_repository import (
    IQuantityRuleRepository,
)
from src.quantity_rule_domain.domain.repositories.quantity_settings_repository import (
    IQuantitySettingsRepository,
)

logger = logging.getLogger(__name__)


def rule_precedence_key(rule: QuantityRule) -> tuple[bool, int, int]:
    """Sort key: explicit priorities first (lowest wins), then lowest rule id."""
    return (rule.priority is None, rule.priority if rule.priority is not None else 0, rule.id)


class RuleResolver:
    """
    Resolves a (product, role) pair to exactly one source.

    Precedence is fixed: a deactivated product is inactive, then the product
    override, then the sitewide rule, and only then the best matching
    quantity rule for the role.
    """

    def __init__(self, rule_repo: IQuantityRuleRepository, settings_repo: IQuantitySettingsRepository) -> None:
        self.rule_repo = rule_repo
        self.settings_repo = settings_repo

    def resolve(self, product: Product, role: str) -> ResolvedSource:
        product_settings = self.settings_repo.get_product_settings(product.id)

        if product_settings.deactivated:
            source = ResolvedSource.inactive()
        elif product_settings.override:
            source = ResolvedSource.override()
        elif self.settings_repo.get_site_options().site_rule_active:
            source = ResolvedSource.sitewide()
        else:
            rule = self.find_applied_rule(product, role)
            source = ResolvedSource.rule(rule.id) if rule else ResolvedSource.none()

        logger.debug(f"Product {product.id} resolved to '{source}' for role '{role}'")
        return source

    def find_applied_rule(self, product: Product, role: str) -> Optional[QuantityRule]:
        """Returns the winning rule among the role's rules that share a category or tag with the product."""
        product_terms = product.taxonomy_ids
        matching = [rule for rule in self.rule_repo.rules_for_role(role) if rule.matches_taxonomy(product_terms)]

        if not matching:
            return None

        return min(matching, key=rule_precedence_key)
