"""Application settings and environment variables."""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_DATABASE: str = os.getenv("DB_NAME", "quantity_rules_db")
    DB_USER: str = os.getenv("DB_USER", "user")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "password")

    # WordPress REST API (identity of the current actor)
    WP_API_BASE_URL: str = os.getenv("WP_API_BASE_URL", "http://localhost")
    WP_API_USER: Optional[str] = os.getenv("WP_API_USER")
    WP_API_APP_PASSWORD: Optional[str] = os.getenv("WP_API_APP_PASSWORD")

    # WooCommerce REST API (product accessor)
    WC_CONSUMER_KEY: Optional[str] = os.getenv("WC_CONSUMER_KEY")
    WC_CONSUMER_SECRET: Optional[str] = os.getenv("WC_CONSUMER_SECRET")

    # Rule resolution
    IPQ_RULE_CACHE_TTL: int = int(os.getenv("IPQ_RULE_CACHE_TTL", str(60 * 60 * 12)))  # 12 hours
    IPQ_GUEST_ROLE: str = os.getenv("IPQ_GUEST_ROLE", "guest")

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
