"""Data Transfer Objects for quantity rule data."""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass
class ContentRecordDTO:
    """DTO for a record row of the content store (a product or a quantity rule)."""

    id: int
    kind: str
    status: str = "publish"
    title: Optional[str] = None


@dataclass
class QuantityValuesDTO:
    """Flat set of quantity values resolved for a product, whatever source they came from."""

    min_value: Optional[int] = None
    max_value: Optional[int] = None
    step: Optional[int] = None
    min_oos: Optional[int] = None
    max_oos: Optional[int] = None
    # Only filled when the values come from a quantity rule
    priority: Optional[int] = None
    roles: Optional[list[str]] = None

    def to_dict(self) -> dict[str, Any]:
        """Returns the flat record; priority and roles only for rule-sourced values."""
        data = asdict(self)
        if self.roles is None:
            data.pop("priority")
            data.pop("roles")
        return data


@dataclass
class QuantityInputParamsDTO:
    """Parameters handed to the storefront quantity input validation script."""

    min: Optional[int] = None
    max: Optional[int] = None
    step: Optional[int] = None

    def to_dict(self) -> dict[str, Optional[int]]:
        return {"min": self.min, "max": self.max, "step": self.step}


@dataclass
class RoleCacheStatsDTO:
    """Hit/miss counters of the per-role rule cache, for diagnostics."""

    hits: int = 0
    misses: int = 0
    cached_roles: set[str] = field(default_factory=set)
