"""Site Options entity."""

from dataclasses import dataclass
from typing import Any, Optional

from src.common.utils.number_utils import validate_number

SITE_OPTIONS_KEY = "ipq_options"

# Keys written on activation when missing from the stored record
SITE_OPTION_DEFAULTS: dict[str, Any] = {
    "ipq_site_rule_active": "",
    "ipq_site_min": "",
    "ipq_site_max": "",
    "ipq_site_step": "",
    "ipq_show_qty_note": "",
    "ipq_qty_text": "Minimum Qty: %MIN%",
    "ipq_show_qty_note_pos": "below",
    "ipq_qty_class": "",
}


@dataclass(frozen=True)
class SiteOptions:
    """The sitewide quantity defaults and display settings."""

    site_rule_active: bool = False
    site_min: Optional[int] = None
    site_max: Optional[int] = None
    site_step: Optional[int] = None
    site_min_oos: Optional[int] = None
    site_max_oos: Optional[int] = None
    show_qty_note: bool = False
    qty_text: str = SITE_OPTION_DEFAULTS["ipq_qty_text"]
    show_qty_note_pos: str = SITE_OPTION_DEFAULTS["ipq_show_qty_note_pos"]
    qty_class: str = ""

    @classmethod
    def from_record(cls, record: Optional[dict[str, Any]]) -> "SiteOptions":
        """Builds options from the raw stored record; a missing record means all defaults."""
        if not record:
            return cls()
        return cls(
            site_rule_active=record.get("ipq_site_rule_active") == "on",
            site_min=validate_number(record.get("ipq_site_min")),
            site_max=validate_number(record.get("ipq_site_max")),
            site_step=validate_number(record.get("ipq_site_step")),
            site_min_oos=validate_number(record.get("ipq_site_min_oos")),
            site_max_oos=validate_number(record.get("ipq_site_max_oos")),
            show_qty_note=record.get("ipq_show_qty_note") == "on",
            qty_text=record.get("ipq_qty_text") or SITE_OPTION_DEFAULTS["ipq_qty_text"],
            show_qty_note_pos=record.get("ipq_show_qty_note_pos") or SITE_OPTION_DEFAULTS["ipq_show_qty_note_pos"],
            qty_class=record.get("ipq_qty_class") or "",
        )
