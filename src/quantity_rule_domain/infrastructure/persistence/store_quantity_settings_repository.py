# src/quantity_rule_domain/infrastructure/persistence/store_quantity_settings_repository.py
"""Per-product settings and site options read from the content and options stores."""

import logging

from src.common.utils.number_utils import validate_number
from src.quantity_rule_domain.domain.entities.product_quantity_settings import (
    ProductQuantitySettings,
)
from src.quantity_rule_domain.domain.entities.site_options import (
    SITE_OPTION_DEFAULTS,
    SITE_OPTIONS_KEY,
    SiteOptions,
)
from src.quantity_rule_domain.domain.repositories.content_store import IContentStore
from src.quantity_rule_domain.domain.repositories.options_store import IOptionsStore
from src.quantity_rule_domain.domain.repositories.quantity_settings_repository import (
    IQuantitySettingsRepository,
)

logger = logging.getLogger(__name__)

FLAG_ON = "on"


class StoreQuantitySettingsRepository(IQuantitySettingsRepository):

    def __init__(self, content_store: IContentStore, options_store: IOptionsStore) -> None:
        self.content_store = content_store
        self.options_store = options_store

    def get_product_settings(self, product_id: int) -> ProductQuantitySettings:
        field = self.content_store.get_field
        return ProductQuantitySettings(
            product_id=product_id,
            deactivated=field(product_id, "_wpbo_deactive") == FLAG_ON,
            override=field(product_id, "_wpbo_override") == FLAG_ON,
            min=validate_number(field(product_id, "_wpbo_minimum")),
            max=validate_number(field(product_id, "_wpbo_maximum")),
            step=validate_number(field(product_id, "_wpbo_step")),
            min_oos=validate_number(field(product_id, "_wpbo_minimum_oos")),
            max_oos=validate_number(field(product_id, "_wpbo_maximum_oos")),
        )

    def get_site_options(self) -> SiteOptions:
        return SiteOptions.from_record(self.options_store.get(SITE_OPTIONS_KEY))

    def ensure_default_site_options(self) -> SiteOptions:
        record = self.options_store.get(SITE_OPTIONS_KEY)

        if record is None:
            record = dict(SITE_OPTION_DEFAULTS)
            self.options_store.set(SITE_OPTIONS_KEY, record)
            logger.info("Site quantity options created with defaults")
        else:
            missing = {key: value for key, value in SITE_OPTION_DEFAULTS.items() if key not in record}
            if missing:
                record = {**record, **missing}
                self.options_store.set(SITE_OPTIONS_KEY, record)
                logger.info(f"Site quantity options completed with defaults for: {', '.join(missing)}")

        return SiteOptions.from_record(record)
