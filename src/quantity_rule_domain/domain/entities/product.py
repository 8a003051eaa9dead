"""Product entity."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Product:
    """Read-only view of a shop product as seen by quantity rule resolution."""

    id: int
    stock_quantity: int | None = None  # None when stock is not managed
    category_ids: frozenset[int] = field(default_factory=frozenset)
    tag_ids: frozenset[int] = field(default_factory=frozenset)
    product_type: str = "simple"

    @property
    def taxonomy_ids(self) -> frozenset[int]:
        """Union of category and tag ids, the set rules are matched against."""
        return self.category_ids | self.tag_ids

    @property
    def is_stock_tracked(self) -> bool:
        return self.stock_quantity is not None

    @property
    def is_out_of_stock(self) -> bool:
        """Only tracked products can be out of stock."""
        return self.is_stock_tracked and self.stock_quantity <= 0

    @property
    def is_oversold(self) -> bool:
        """Tracked stock below zero, as left behind by backorders."""
        return self.is_stock_tracked and self.stock_quantity < 0

    @property
    def is_variable(self) -> bool:
        return self.product_type == "variable"
