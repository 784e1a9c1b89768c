"""Pharmacy Service — holds a drug batch and advances it one day at a time.

Input validation happens here (DrugRecord); Core only ever sees valid Drugs.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from src.core.logging import get_logger
from src.core.pharmacy.engine import advance
from src.core.pharmacy.models import Drug
from src.core.pharmacy.rules import RuleTable
from src.services.schemas import DrugRecord

logger = get_logger(__name__)


class PharmacyService:
    """Drug batch + the rule table it is advanced with"""

    def __init__(self, rules: RuleTable, drugs: list[Drug] | None = None):
        self._rules = rules
        self._drugs: list[Drug] = drugs if drugs is not None else []

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        rules: RuleTable,
    ) -> PharmacyService:
        """Validate raw mappings and build a service.

        Raises pydantic.ValidationError on the first malformed record.
        """
        drugs = [DrugRecord.model_validate(raw).to_drug() for raw in records]
        return cls(rules, drugs)

    @property
    def drugs(self) -> list[Drug]:
        return self._drugs

    @property
    def rules(self) -> RuleTable:
        return self._rules

    def update_benefit_value(self) -> list[Drug]:
        """One simulated day for the whole batch. Returns the same list."""
        advance(self._drugs, self._rules)
        fallback = sum(1 for d in self._drugs if not self._rules.has_rule(d.name))
        logger.info(
            "Advanced %d drugs one day (%d on default rule)",
            len(self._drugs),
            fallback,
        )
        return self._drugs

    def snapshot(self) -> list[dict[str, Any]]:
        """Current batch as plain dicts, in batch order."""
        return [DrugRecord.from_drug(d).model_dump() for d in self._drugs]
