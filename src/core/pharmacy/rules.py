"""Benefit rules: per-drug parameters and the name -> rule table.

Rules are plain frozen records. All amounts are non-negative; the engine
decides whether an amount is added (growth) or subtracted (decay).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

logger = logging.getLogger(__name__)


class DrugName(str, Enum):
    DOLIPRANE = "Doliprane"
    HERBAL_TEA = "Herbal Tea"
    FERVEX = "Fervex"
    MAGIC_PILL = "Magic Pill"
    DAFALGAN = "Dafalgan"


def _check_amount(field_name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{field_name} must be >= 0, got {value}")


@dataclass(frozen=True)
class FlatRule:
    """Constant change per day, scaled by `expired_multiplier` once expired."""

    decay_per_step: int = 0
    growth_per_step: int = 0
    expired_multiplier: int = 2
    counts_down: bool = True

    def __post_init__(self) -> None:
        _check_amount("decay_per_step", self.decay_per_step)
        _check_amount("growth_per_step", self.growth_per_step)
        if self.expired_multiplier < 1:
            raise ValueError(
                f"expired_multiplier must be >= 1, got {self.expired_multiplier}"
            )


@dataclass(frozen=True)
class GrowthTier:
    """Growth applied while 0 < expires_in <= max_expires_in."""

    max_expires_in: int
    growth: int

    def __post_init__(self) -> None:
        _check_amount("growth", self.growth)


@dataclass(frozen=True)
class TieredRule:
    """Growth that speeds up as expiry approaches.

    Tiers are kept sorted by threshold, tightest first, so the first tier
    whose threshold is >= expires_in wins. Above every threshold
    `base_growth` applies.
    """

    tiers: tuple[GrowthTier, ...]
    base_growth: int = 1
    zero_on_expiry: bool = True
    counts_down: bool = True

    def __post_init__(self) -> None:
        _check_amount("base_growth", self.base_growth)
        ordered = tuple(sorted(self.tiers, key=lambda t: t.max_expires_in))
        thresholds = [t.max_expires_in for t in ordered]
        if len(set(thresholds)) != len(thresholds):
            raise ValueError(f"duplicate tier thresholds: {thresholds}")
        object.__setattr__(self, "tiers", ordered)

    def growth_for(self, expires_in: int) -> int:
        for tier in self.tiers:
            if expires_in <= tier.max_expires_in:
                return tier.growth
        return self.base_growth


@dataclass(frozen=True)
class FrozenRule:
    """Benefit never changes. Countdown is controlled separately."""

    counts_down: bool = False


Rule = Union[FlatRule, TieredRule, FrozenRule]

DEFAULT_RULE: Rule = FlatRule(decay_per_step=1)


class RuleTable:
    """
    Immutable name -> Rule mapping with a default for unlisted names.
    Built once at startup and handed to the engine explicitly.
    """

    def __init__(
        self,
        rules: Optional[Mapping[str, Rule]] = None,
        default: Rule = DEFAULT_RULE,
    ) -> None:
        self._rules: Mapping[str, Rule] = MappingProxyType(dict(rules or {}))
        self._default = default

    @property
    def default(self) -> Rule:
        return self._default

    def rule_for(self, name: str) -> Rule:
        """Registered rule for `name`, else the default rule. Never fails."""
        rule = self._rules.get(name)
        if rule is None:
            logger.debug("No rule for %r, fallback applied", name)
            return self._default
        return rule

    def has_rule(self, name: str) -> bool:
        return name in self._rules

    def names(self) -> list[str]:
        return list(self._rules)

    def with_rule(self, name: str, rule: Rule) -> RuleTable:
        """New table with `name` (re)bound to `rule`. This table is unchanged."""
        updated = dict(self._rules)
        updated[name] = rule
        return RuleTable(updated, default=self._default)

    def __len__(self) -> int:
        return len(self._rules)


def build_rule_table() -> RuleTable:
    """Standard pharmacy rules. Doliprane uses the default rule."""
    return RuleTable(
        {
            DrugName.HERBAL_TEA.value: FlatRule(growth_per_step=1),
            DrugName.FERVEX.value: TieredRule(
                tiers=(
                    GrowthTier(max_expires_in=5, growth=3),
                    GrowthTier(max_expires_in=10, growth=2),
                ),
                base_growth=1,
            ),
            DrugName.MAGIC_PILL.value: FrozenRule(),
            DrugName.DAFALGAN.value: FlatRule(decay_per_step=2),
        }
    )
