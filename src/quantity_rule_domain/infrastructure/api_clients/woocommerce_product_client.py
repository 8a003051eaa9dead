# src/quantity_rule_domain/infrastructure/api_clients/woocommerce_product_client.py
"""Client for reading products from the WooCommerce REST API."""

import logging
from typing import Any, Optional

import requests

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import APIError
from src.quantity_rule_domain.domain.entities.product import Product
from src.quantity_rule_domain.infrastructure.api_clients.http_session import REQUEST_TIMEOUT, build_session

logger = logging.getLogger(__name__)

PRODUCTS_ENDPOINT = "/wp-json/wc/v3/products"


class WooCommerceProductClient:
    def __init__(self) -> None:
        self.base_url = settings.WP_API_BASE_URL.rstrip("/")
        self.consumer_key = settings.WC_CONSUMER_KEY
        self.consumer_secret = settings.WC_CONSUMER_SECRET
        self.session = build_session()

    def get_product(self, product_id: int) -> Optional[Product]:
        """Fetches a product by id; returns None if WooCommerce does not know it."""
        if not self.consumer_key or not self.consumer_secret:
            raise APIError("WC_CONSUMER_KEY / WC_CONSUMER_SECRET are not set in environment variables.")

        endpoint = f"{PRODUCTS_ENDPOINT}/{product_id}"
        params = {"consumer_key": self.consumer_key, "consumer_secret": self.consumer_secret}

        try:
            response = self.session.get(f"{self.base_url}{endpoint}", params=params, timeout=REQUEST_TIMEOUT)
            if response.status_code == 404:
                logger.warning(f"Product {product_id} not found in WooCommerce")
                return None
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout as e:
            raise APIError(f"Request for product {product_id} timed out", original_exception=e, endpoint=endpoint)
        except requests.exceptions.JSONDecodeError as e:
            raise APIError(f"Failed to decode product {product_id} response", original_exception=e, endpoint=endpoint)
        except requests.exceptions.RequestException as e:
            status_code = e.response.status_code if e.response is not None else None
            raise APIError(
                f"Error fetching product {product_id}", original_exception=e, status_code=status_code, endpoint=endpoint
            )

        return self.product_from_api_response(data)

    @staticmethod
    def product_from_api_response(data: dict[str, Any]) -> Product:
        """Maps a WooCommerce product payload; stock counts only when stock is managed."""
        stock_quantity = data.get("stock_quantity") if data.get("manage_stock") is True else None
        return Product(
            id=int(data["id"]),
            stock_quantity=int(stock_quantity) if stock_quantity is not None else None,
            category_ids=frozenset(int(term["id"]) for term in data.get("categories") or []),
            tag_ids=frozenset(int(term["id"]) for term in data.get("tags") or []),
            product_type=data.get("type") or "simple",
        )
