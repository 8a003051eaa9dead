"""Per-product quantity settings value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductQuantitySettings:
    """Flags and override values stored on a single product."""

    product_id: int
    deactivated: bool = False
    override: bool = False
    min: int | None = None
    max: int | None = None
    step: int | None = None
    min_oos: int | None = None
    max_oos: int | None = None
