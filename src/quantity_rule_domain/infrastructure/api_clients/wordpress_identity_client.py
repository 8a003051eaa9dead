# src/quantity_rule_domain/infrastructure/api_clients/wordpress_identity_client.py
"""Client resolving the current actor's role through the WordPress REST API."""

import logging
from typing import Optional

import requests

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import APIError
from src.quantity_rule_domain.infrastructure.api_clients.http_session import REQUEST_TIMEOUT, build_session

logger = logging.getLogger(__name__)

USERS_ME_ENDPOINT = "/wp-json/wp/v2/users/me"


class WordPressIdentityClient:
    def __init__(self, username: Optional[str] = None, app_password: Optional[str] = None) -> None:
        self.base_url = settings.WP_API_BASE_URL.rstrip("/")
        self.username = username or settings.WP_API_USER
        self.app_password = app_password or settings.WP_API_APP_PASSWORD
        self.session = build_session()

    def current_actor_role(self) -> Optional[str]:
        """
        Returns the primary role of the authenticated user, or None when nobody is logged in.

        The primary role is the last entry of the user's role list. Missing
        credentials and a 401 answer both mean "unauthenticated".
        """
        if not self.username or not self.app_password:
            return None

        url = f"{self.base_url}{USERS_ME_ENDPOINT}"
        try:
            response = self.session.get(
                url,
                params={"context": "edit"},
                auth=(self.username, self.app_password),
                timeout=REQUEST_TIMEOUT,
            )
            if response.status_code == 401:
                logger.info(f"WordPress rejected credentials for '{self.username}', treating as guest")
                return None
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout as e:
            raise APIError("Request for current user timed out", original_exception=e, endpoint=USERS_ME_ENDPOINT)
        except requests.exceptions.JSONDecodeError as e:
            raise APIError(
                "Failed to decode current user response", original_exception=e, endpoint=USERS_ME_ENDPOINT
            )
        except requests.exceptions.RequestException as e:
            status_code = e.response.status_code if e.response is not None else None
            raise APIError(
                "Error fetching current user", original_exception=e, status_code=status_code, endpoint=USERS_ME_ENDPOINT
            )

        roles = data.get("roles") or []
        return roles[-1] if roles else None
