"""Quantity Rule entity."""

from dataclasses import dataclass, field

QUANTITY_RULE_KIND = "quantity-rule"


@dataclass(frozen=True)
class QuantityRule:
    """An admin-authored rule applying quantity limits to products by taxonomy and role."""

    id: int
    category_ids: frozenset[int] = field(default_factory=frozenset)
    tag_ids: frozenset[int] = field(default_factory=frozenset)
    priority: int | None = None  # lower wins, None ranks after every explicit priority
    roles: tuple[str, ...] = ()
    min: int | None = None
    max: int | None = None
    step: int | None = None
    min_oos: int | None = None
    max_oos: int | None = None

    @property
    def taxonomy_targets(self) -> frozenset[int]:
        return self.category_ids | self.tag_ids

    def applies_to_role(self, role: str) -> bool:
        return role in self.roles

    def matches_taxonomy(self, taxonomy_ids: frozenset[int]) -> bool:
        """A rule without targets never matches."""
        return bool(self.taxonomy_targets & taxonomy_ids)
