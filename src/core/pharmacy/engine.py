"""Daily transition: applies each drug's rule for exactly one day."""

from __future__ import annotations

from typing import MutableSequence

from .models import Drug, clamp_benefit
from .rules import FlatRule, FrozenRule, Rule, RuleTable, TieredRule


def is_expired(drug: Drug) -> bool:
    """expires_in <= 0. Checked before the day's countdown."""
    return drug.expires_in <= 0


def _next_benefit(drug: Drug, rule: Rule, expired: bool) -> int:
    if isinstance(rule, TieredRule):
        if expired:
            if rule.zero_on_expiry:
                return 0
            return drug.benefit + rule.growth_for(0)
        return drug.benefit + rule.growth_for(drug.expires_in)

    if isinstance(rule, FlatRule):
        delta = rule.growth_per_step - rule.decay_per_step
        if expired:
            delta *= rule.expired_multiplier
        return drug.benefit + delta

    raise TypeError(f"Unsupported rule type: {type(rule).__name__}")


def step_drug(drug: Drug, rule: Rule) -> Drug:
    """Advance one drug by one day, in place.

    Expiry and tier are decided on the incoming expires_in, then benefit is
    clamped, then the countdown runs (unless the rule exempts it).
    Frozen drugs keep their benefit untouched.
    """
    expired = is_expired(drug)
    if not isinstance(rule, FrozenRule):
        drug.benefit = clamp_benefit(_next_benefit(drug, rule, expired))
    if rule.counts_down:
        drug.expires_in -= 1
    return drug


def advance(drugs: MutableSequence[Drug], rules: RuleTable) -> MutableSequence[Drug]:
    """Advance every drug in the batch by one day.

    Mutates and returns the same batch; order and length are preserved.
    Drugs are independent, so processing order does not matter.
    """
    for drug in drugs:
        step_drug(drug, rules.rule_for(drug.name))
    return drugs
