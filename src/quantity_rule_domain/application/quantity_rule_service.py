# src/quantity_rule_domain/application/quantity_rule_service.py
"""Application service for resolving product quantity limits."""

import logging
from typing import Any, Optional

from src.common.config.settings import settings
from src.common.dtos.quantity_dtos import QuantityInputParamsDTO, QuantityValuesDTO
from src.quantity_rule_domain.domain.entities.product import Product
from src.quantity_rule_domain.domain.entities.quantity_rule import QUANTITY_RULE_KIND
from src.quantity_rule_domain.domain.entities.resolved_source import ResolvedSource
from src.quantity_rule_domain.domain.entities.site_options import SiteOptions
from src.quantity_rule_domain.domain.repositories.content_store import IContentStore
from src.quantity_rule_domain.domain.repositories.quantity_rule_repository import (
    IQuantityRuleRepository,
)
from src.quantity_rule_domain.domain.repositories.quantity_settings_repository import (
    IQuantitySettingsRepository,
)
from src.quantity_rule_domain.domain.services.rule_resolver import RuleResolver
from src.quantity_rule_domain.domain.services.value_extractor import QuantityField, ValueExtractor
from src.quantity_rule_domain.infrastructure.api_clients.wordpress_identity_client import (
    WordPressIdentityClient,
)

logger = logging.getLogger(__name__)


class QuantityRuleApplicationService:
    """Entry point for callers: role derivation, resolution, extraction and activation bookkeeping."""

    def __init__(
        self,
        rule_repo: IQuantityRuleRepository,
        settings_repo: IQuantitySettingsRepository,
        content_store: IContentStore,
        identity_client: Optional[WordPressIdentityClient] = None,
    ) -> None:
        self.rule_repo = rule_repo
        self.settings_repo = settings_repo
        self.content_store = content_store
        self.identity_client = identity_client
        self.resolver = RuleResolver(rule_repo, settings_repo)
        self.extractor = ValueExtractor(rule_repo, settings_repo)

    def resolve_role(self, role: Optional[str] = None) -> str:
        """An explicit role wins; otherwise the authenticated actor's role, falling back to guest."""
        if role:
            return role
        if self.identity_client is not None:
            actor_role = self.identity_client.current_actor_role()
            if actor_role:
                return actor_role
        return settings.IPQ_GUEST_ROLE

    def get_applied_rule(self, product: Product, role: Optional[str] = None) -> ResolvedSource:
        """Returns the source (inactive, override, sitewide, rule or none) governing the product."""
        return self.resolver.resolve(product, self.resolve_role(role))

    def get_value(self, field: QuantityField | str, product: Product, role: Optional[str] = None) -> Any:
        """Resolves the product's source and extracts one field (or a QuantityValuesDTO for 'all')."""
        source = self.get_applied_rule(product, role)
        return self.extractor.extract(field, product, source)

    def get_values(self, product: Product, role: Optional[str] = None) -> Optional[QuantityValuesDTO]:
        return self.get_value(QuantityField.ALL, product, role)

    def get_validation_params(self, product: Product, role: Optional[str] = None) -> Optional[QuantityInputParamsDTO]:
        """
        Builds the min/max/step parameters for the storefront input validation script.

        Only variable products get parameters; inactive products and products
        without any applicable source get None. An oversold product (stock below
        zero) uses the out-of-stock min/max of whichever source applies.
        """
        if not product.is_variable:
            return None

        source = self.get_applied_rule(product, role)
        if not source.is_active:
            return None

        values = self.extractor.extract(QuantityField.ALL, product, source)
        if values is None:
            return None

        min_value, max_value = values.min_value, values.max_value
        if product.is_oversold:
            if values.min_oos is not None:
                min_value = values.min_oos
            if values.max_oos is not None:
                max_value = values.max_oos

        return QuantityInputParamsDTO(min=min_value, max=max_value, step=values.step)

    def ensure_default_site_options(self) -> SiteOptions:
        return self.settings_repo.ensure_default_site_options()

    def backfill_rule_roles(self, all_roles: list[str]) -> int:
        """Grants every role to published rules that were saved without a role list."""
        updated = 0
        for record in self.content_store.fetch_published_records(QUANTITY_RULE_KIND):
            if not self.content_store.get_field(record.id, "_roles"):
                self.content_store.set_field(record.id, "_roles", list(all_roles))
                updated += 1

        if updated:
            logger.info(f"Applied {len(all_roles)} roles to {updated} quantity rules without roles")
            self.rule_repo.invalidate()
        return updated

    def invalidate_rule_cache(self, role: Optional[str] = None) -> None:
        self.rule_repo.invalidate(role)
