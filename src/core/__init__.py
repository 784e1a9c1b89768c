"""Pharmacy Core"""
__version__ = "0.1.0"

from src.core.pharmacy import Drug, RuleTable, advance, build_rule_table

__all__ = [
    "Drug",
    "RuleTable",
    "advance",
    "build_rule_table",
]
