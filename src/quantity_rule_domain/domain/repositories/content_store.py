# src/quantity_rule_domain/domain/repositories/content_store.py
"""Content store interface (records and their meta fields)."""
from abc import ABC, abstractmethod
from typing import Any, Optional

from src.common.dtos.quantity_dtos import ContentRecordDTO


class IContentStore(ABC):

    @abstractmethod
    def fetch_published_records(self, kind: str) -> list[ContentRecordDTO]:
        """Retrieves every published record of the given kind."""
        pass

    @abstractmethod
    def get_record(self, record_id: int) -> Optional[ContentRecordDTO]:
        """Retrieves a single record regardless of its status, or None if it does not exist."""
        pass

    @abstractmethod
    def get_field(self, record_id: int, field_name: str) -> Any:
        """Retrieves a single meta field of a record, or None if it is not set."""
        pass

    @abstractmethod
    def set_field(self, record_id: int, field_name: str, value: Any) -> None:
        """Saves or updates a single meta field of a record."""
        pass
