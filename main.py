# main.py
"""Command line entry point: resolve the quantity limits that apply to a product."""

import logging
import sys
from typing import Optional

import click

from src.common.exceptions.custom_exceptions import APIError, DatabaseError
from src.common.logger_config import setup_logging
from src.quantity_rule_domain.application.quantity_rule_service import (
    QuantityRuleApplicationService,
)
from src.quantity_rule_domain.domain.services.value_extractor import QuantityField
from src.quantity_rule_domain.infrastructure.api_clients.woocommerce_product_client import (
    WooCommerceProductClient,
)
from src.quantity_rule_domain.infrastructure.api_clients.wordpress_identity_client import (
    WordPressIdentityClient,
)
from src.quantity_rule_domain.infrastructure.cache.in_memory_cache_store import InMemoryCacheStore
from src.quantity_rule_domain.infrastructure.persistence.mysql_content_store import MySQLContentStore
from src.quantity_rule_domain.infrastructure.persistence.mysql_options_store import MySQLOptionsStore
from src.quantity_rule_domain.infrastructure.persistence.store_quantity_rule_repository import (
    StoreQuantityRuleRepository,
)
from src.quantity_rule_domain.infrastructure.persistence.store_quantity_settings_repository import (
    StoreQuantitySettingsRepository,
)

logger = logging.getLogger(__name__)


def setup_dependencies() -> tuple[QuantityRuleApplicationService, MySQLContentStore, MySQLOptionsStore]:
    """Initializes and wires up the quantity rule dependencies."""
    content_store = MySQLContentStore()
    options_store = MySQLOptionsStore()
    rule_repository = StoreQuantityRuleRepository(content_store=content_store, cache_store=InMemoryCacheStore())
    settings_repository = StoreQuantitySettingsRepository(content_store=content_store, options_store=options_store)
    quantity_service = QuantityRuleApplicationService(
        rule_repo=rule_repository,
        settings_repo=settings_repository,
        content_store=content_store,
        identity_client=WordPressIdentityClient(),
    )
    return quantity_service, content_store, options_store


def init_database(
    quantity_service: QuantityRuleApplicationService,
    content_store: MySQLContentStore,
    options_store: MySQLOptionsStore,
) -> None:
    """Creates the tables and writes default site options (idempotent)."""
    content_store.create_tables()
    options_store.create_tables()
    quantity_service.ensure_default_site_options()
    logger.info("Database tables and default site options verified")


@click.command()
@click.argument("product_id", type=int)
@click.option("--role", default=None, help="Role to resolve for. Defaults to the authenticated user's role or guest.")
@click.option(
    "--field",
    "field_name",
    type=click.Choice([quantity_field.value for quantity_field in QuantityField]),
    default=QuantityField.ALL.value,
    show_default=True,
    help="Quantity field to extract.",
)
@click.option("--init-db", is_flag=True, help="Create tables and default site options first.")
def main(product_id: int, role: Optional[str], field_name: str, init_db: bool) -> None:
    """Print the quantity source and values applying to PRODUCT_ID."""
    setup_logging()
    quantity_service, content_store, options_store = setup_dependencies()

    try:
        if init_db:
            init_database(quantity_service, content_store, options_store)

        product = WooCommerceProductClient().get_product(product_id)
        if product is None:
            logger.error(f"Product {product_id} not found")
            sys.exit(1)

        resolved_role = quantity_service.resolve_role(role)
        source = quantity_service.get_applied_rule(product, resolved_role)
        value = quantity_service.extractor.extract(field_name, product, source)

        logger.info(f"Product {product_id} ({product.product_type}), role '{resolved_role}': source [bold]{source}[/bold]")
        if hasattr(value, "to_dict"):
            for key, item in value.to_dict().items():
                logger.info(f"  {key}: {item}")
        else:
            logger.info(f"  {field_name}: {value}")

    except (APIError, DatabaseError) as e:
        logger.error(f"Quantity resolution failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
