# tests/conftest.py
from datetime import datetime, timedelta
from typing import Any, Optional
from unittest.mock import Mock

import pytest
import pytz

from src.common.config.settings import settings
from src.common.dtos.quantity_dtos import ContentRecordDTO
from src.quantity_rule_domain.application.quantity_rule_service import QuantityRuleApplicationService
from src.quantity_rule_domain.domain.entities.product import Product
from src.quantity_rule_domain.domain.entities.quantity_rule import QUANTITY_RULE_KIND
from src.quantity_rule_domain.domain.entities.site_options import SITE_OPTIONS_KEY
from src.quantity_rule_domain.domain.repositories.content_store import IContentStore
from src.quantity_rule_domain.domain.repositories.options_store import IOptionsStore
from src.quantity_rule_domain.domain.services.rule_resolver import RuleResolver
from src.quantity_rule_domain.domain.services.value_extractor import ValueExtractor
from src.quantity_rule_domain.infrastructure.api_clients.wordpress_identity_client import WordPressIdentityClient
from src.quantity_rule_domain.infrastructure.cache.in_memory_cache_store import InMemoryCacheStore
from src.quantity_rule_domain.infrastructure.persistence.store_quantity_rule_repository import (
    StoreQuantityRuleRepository,
)
from src.quantity_rule_domain.infrastructure.persistence.store_quantity_settings_repository import (
    StoreQuantitySettingsRepository,
)


class FakeContentStore(IContentStore):
    """Dict-backed content store standing in for MySQL in unit tests."""

    def __init__(self) -> None:
        self.records: dict[int, ContentRecordDTO] = {}
        self.fields: dict[int, dict[str, Any]] = {}
        self.fetch_calls = 0
        self.record_lookups = 0

    def add_record(self, record_id: int, kind: str, status: str = "publish", **fields: Any) -> None:
        self.records[record_id] = ContentRecordDTO(id=record_id, kind=kind, status=status)
        self.fields.setdefault(record_id, {}).update(fields)

    def fetch_published_records(self, kind: str) -> list[ContentRecordDTO]:
        self.fetch_calls += 1
        return [record for record in self.records.values() if record.kind == kind and record.status == "publish"]

    def get_record(self, record_id: int) -> Optional[ContentRecordDTO]:
        self.record_lookups += 1
        return self.records.get(record_id)

    def get_field(self, record_id: int, field_name: str) -> Any:
        return self.fields.get(record_id, {}).get(field_name)

    def set_field(self, record_id: int, field_name: str, value: Any) -> None:
        self.fields.setdefault(record_id, {})[field_name] = value


class FakeOptionsStore(IOptionsStore):
    def __init__(self) -> None:
        self.options: dict[str, dict[str, Any]] = {}
        self.set_calls = 0

    def get(self, key: str) -> Optional[dict[str, Any]]:
        return self.options.get(key)

    def set(self, key: str, record: dict[str, Any]) -> None:
        self.set_calls += 1
        self.options[key] = dict(record)


class FakeClock:
    """Callable clock that tests move forward by hand."""

    def __init__(self) -> None:
        self.now = datetime(2024, 1, 1, 12, 0, 0, tzinfo=pytz.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture(autouse=True)
def mock_settings_rule_cache(mocker) -> None:
    """Pins the cache TTL and guest role so environment variables cannot leak into tests."""
    mocker.patch.object(settings, "IPQ_RULE_CACHE_TTL", 43200)
    mocker.patch.object(settings, "IPQ_GUEST_ROLE", "guest")


@pytest.fixture
def content_store() -> FakeContentStore:
    return FakeContentStore()


@pytest.fixture
def options_store() -> FakeOptionsStore:
    return FakeOptionsStore()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache_store(fake_clock) -> InMemoryCacheStore:
    return InMemoryCacheStore(clock=fake_clock)


@pytest.fixture
def rule_repository(content_store, cache_store) -> StoreQuantityRuleRepository:
    return StoreQuantityRuleRepository(content_store=content_store, cache_store=cache_store)


@pytest.fixture
def settings_repository(content_store, options_store) -> StoreQuantitySettingsRepository:
    return StoreQuantitySettingsRepository(content_store=content_store, options_store=options_store)


@pytest.fixture
def resolver(rule_repository, settings_repository) -> RuleResolver:
    return RuleResolver(rule_repository, settings_repository)


@pytest.fixture
def extractor(rule_repository, settings_repository) -> ValueExtractor:
    return ValueExtractor(rule_repository, settings_repository)


@pytest.fixture
def mock_identity_client() -> Mock:
    """Mock for WordPressIdentityClient."""
    return Mock(spec=WordPressIdentityClient)


@pytest.fixture
def quantity_service(
    rule_repository, settings_repository, content_store, mock_identity_client
) -> QuantityRuleApplicationService:
    return QuantityRuleApplicationService(
        rule_repo=rule_repository,
        settings_repo=settings_repository,
        content_store=content_store,
        identity_client=mock_identity_client,
    )


@pytest.fixture
def add_rule(content_store):
    """Adds a published quantity rule; lists of ids and roles are stored the way the admin screen saves them."""

    def _add_rule(
        rule_id: int,
        cats: Optional[list] = None,
        tags: Optional[list] = None,
        roles: Optional[list] = None,
        priority: Any = "",
        **values: Any,
    ) -> None:
        content_store.add_record(
            rule_id,
            QUANTITY_RULE_KIND,
            _cats=cats if cats is not None else [],
            _tags=tags if tags is not None else [],
            _roles=roles if roles is not None else ["customer"],
            _priority=priority,
            **{f"_{key}": value for key, value in values.items()},
        )

    return _add_rule


@pytest.fixture
def set_site_options(options_store):
    def _set_site_options(**options: Any) -> None:
        options_store.options[SITE_OPTIONS_KEY] = {f"ipq_{key}": value for key, value in options.items()}

    return _set_site_options


@pytest.fixture
def sample_product() -> Product:
    """In stock product in category 5 and tag 9."""
    return Product(
        id=100,
        stock_quantity=10,
        category_ids=frozenset({5}),
        tag_ids=frozenset({9}),
        product_type="simple",
    )


@pytest.fixture
def out_of_stock_product() -> Product:
    return Product(id=100, stock_quantity=0, category_ids=frozenset({5}), tag_ids=frozenset({9}))


@pytest.fixture
def variable_product() -> Product:
    return Product(id=200, stock_quantity=None, category_ids=frozenset({5}), product_type="variable")
