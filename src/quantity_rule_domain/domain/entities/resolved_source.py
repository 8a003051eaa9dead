"""Resolved Source value object."""

from dataclasses import dataclass
from enum import Enum


class SourceKind(str, Enum):
    INACTIVE = "inactive"
    OVERRIDE = "override"
    SITEWIDE = "sitewide"
    RULE = "rule"
    NONE = "none"


@dataclass(frozen=True)
class ResolvedSource:
    """Which configuration source governs a product for a role; rule_id is set only for RULE."""

    kind: SourceKind
    rule_id: int | None = None

    def __post_init__(self) -> None:
        if self.kind is SourceKind.RULE and self.rule_id is None:
            raise ValueError("A rule source needs a rule_id.")
        if self.kind is not SourceKind.RULE and self.rule_id is not None:
            raise ValueError(f"A {self.kind.value} source cannot carry a rule_id.")

    @classmethod
    def inactive(cls) -> "ResolvedSource":
        return cls(SourceKind.INACTIVE)

    @classmethod
    def override(cls) -> "ResolvedSource":
        return cls(SourceKind.OVERRIDE)

    @classmethod
    def sitewide(cls) -> "ResolvedSource":
        return cls(SourceKind.SITEWIDE)

    @classmethod
    def rule(cls, rule_id: int) -> "ResolvedSource":
        return cls(SourceKind.RULE, rule_id)

    @classmethod
    def none(cls) -> "ResolvedSource":
        return cls(SourceKind.NONE)

    @property
    def is_active(self) -> bool:
        """True when the source carries values (override, sitewide or a rule)."""
        return self.kind in (SourceKind.OVERRIDE, SourceKind.SITEWIDE, SourceKind.RULE)

    def __str__(self) -> str:
        if self.kind is SourceKind.RULE:
            return f"rule:{self.rule_id}"
        return self.kind.value
