# src/quantity_rule_domain/domain/services/value_extractor.py
"""Reads the quantity values of a resolved source into one flat shape."""

import logging
from enum import Enum
from typing import Any, Optional

from src.common.dtos.quantity_dtos import QuantityValuesDTO
from src.quantity_rule_domain.domain.entities.product import Product
from src.quantity_rule_domain.domain.entities.resolved_source import ResolvedSource, SourceKind
from src.quantity_rule_domain.domain.repositories.quantity_rule_repository import (
    IQuantityRuleRepository,
)
from src.quantity_rule_domain.domain.repositories.quantity_settings_repository import (
    IQuantitySettingsRepository,
)

logger = logging.getLogger(__name__)


class QuantityField(str, Enum):
    MIN = "min"
    MAX = "max"
    STEP = "step"
    MIN_OOS = "min_oos"
    MAX_OOS = "max_oos"
    PRIORITY = "priority"
    ROLE = "role"
    ALL = "all"


class ValueExtractor:
    """
    Extracts min/max/step (and out-of-stock variants) for a product from its resolved source.

    Single-field queries always return a bare value or None, for every source.
    Out-of-stock values replace min/max only for product overrides; sitewide
    and rule values are returned as stored.
    """

    def __init__(self, rule_repo: IQuantityRuleRepository, settings_repo: IQuantitySettingsRepository) -> None:
        self.rule_repo = rule_repo
        self.settings_repo = settings_repo

    def extract(self, field: QuantityField | str, product: Product, source: ResolvedSource) -> Any:
        """Returns the requested value, a QuantityValuesDTO for 'all', or None when nothing applies."""
        quantity_field = self._coerce_field(field)
        if quantity_field is None or not source.is_active:
            return None

        values = self.values_for(product, source)
        if values is None:
            return None

        if quantity_field is QuantityField.ALL:
            return values
        if quantity_field is QuantityField.ROLE:
            return list(values.roles) if values.roles is not None else None

        return {
            QuantityField.MIN: values.min_value,
            QuantityField.MAX: values.max_value,
            QuantityField.STEP: values.step,
            QuantityField.MIN_OOS: values.min_oos,
            QuantityField.MAX_OOS: values.max_oos,
            QuantityField.PRIORITY: values.priority,
        }[quantity_field]

    def values_for(self, product: Product, source: ResolvedSource) -> Optional[QuantityValuesDTO]:
        if source.kind is SourceKind.OVERRIDE:
            return self._override_values(product)
        if source.kind is SourceKind.SITEWIDE:
            return self._sitewide_values()
        if source.kind is SourceKind.RULE:
            return self._rule_values(source.rule_id)
        return None

    def _override_values(self, product: Product) -> QuantityValuesDTO:
        product_settings = self.settings_repo.get_product_settings(product.id)
        min_value = product_settings.min
        max_value = product_settings.max

        if product.is_out_of_stock:
            if product_settings.min_oos is not None:
                min_value = product_settings.min_oos
            if product_settings.max_oos is not None:
                max_value = product_settings.max_oos

        return QuantityValuesDTO(
            min_value=min_value,
            max_value=max_value,
            step=product_settings.step,
            min_oos=product_settings.min_oos,
            max_oos=product_settings.max_oos,
        )

    def _sitewide_values(self) -> QuantityValuesDTO:
        options = self.settings_repo.get_site_options()
        return QuantityValuesDTO(
            min_value=options.site_min,
            max_value=options.site_max,
            step=options.site_step,
            min_oos=options.site_min_oos,
            max_oos=options.site_max_oos,
        )

    def _rule_values(self, rule_id: int) -> Optional[QuantityValuesDTO]:
        rule = self.rule_repo.get_rule(rule_id)
        if rule is None:
            logger.warning(f"Quantity rule {rule_id} no longer exists, no values extracted")
            return None

        return QuantityValuesDTO(
            min_value=rule.min,
            max_value=rule.max,
            step=rule.step,
            min_oos=rule.min_oos,
            max_oos=rule.max_oos,
            priority=rule.priority,
            roles=list(rule.roles),
        )

    @staticmethod
    def _coerce_field(field: QuantityField | str) -> Optional[QuantityField]:
        try:
            return QuantityField(field)
        except ValueError:
            logger.debug(f"Unknown quantity field requested: {field!r}")
            return None
