"""Shared test fixtures."""

import pytest

from src.core.pharmacy.rules import RuleTable, build_rule_table


@pytest.fixture()
def rules() -> RuleTable:
    """Standard pharmacy rule table."""
    return build_rule_table()
