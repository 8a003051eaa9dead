# src/quantity_rule_domain/domain/repositories/quantity_settings_repository.py
"""Repository interface for per-product settings and sitewide options."""
from abc import ABC, abstractmethod

from src.quantity_rule_domain.domain.entities.product_quantity_settings import (
    ProductQuantitySettings,
)
from src.quantity_rule_domain.domain.entities.site_options import SiteOptions


class IQuantitySettingsRepository(ABC):

    @abstractmethod
    def get_product_settings(self, product_id: int) -> ProductQuantitySettings:
        """Retrieves the deactivate/override flags and override values of a product."""
        pass

    @abstractmethod
    def get_site_options(self) -> SiteOptions:
        """Retrieves the sitewide options, defaulted when nothing is stored."""
        pass

    @abstractmethod
    def ensure_default_site_options(self) -> SiteOptions:
        """Writes default values for any missing site option key and returns the result."""
        pass
