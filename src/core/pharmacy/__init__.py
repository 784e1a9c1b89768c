"""Pharmacy Core — pure Python, no I/O"""

from .engine import advance, is_expired, step_drug
from .models import BENEFIT_MAX, BENEFIT_MIN, Drug, clamp_benefit
from .rules import (
    DEFAULT_RULE,
    DrugName,
    FlatRule,
    FrozenRule,
    GrowthTier,
    Rule,
    RuleTable,
    TieredRule,
    build_rule_table,
)

__all__ = [
    "advance",
    "is_expired",
    "step_drug",
    "BENEFIT_MAX",
    "BENEFIT_MIN",
    "Drug",
    "clamp_benefit",
    "DEFAULT_RULE",
    "DrugName",
    "FlatRule",
    "FrozenRule",
    "GrowthTier",
    "Rule",
    "RuleTable",
    "TieredRule",
    "build_rule_table",
]
