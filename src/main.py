"""Reference caller: runs the daily pharmacy simulation and prints it as JSON."""

from __future__ import annotations

import json
from typing import Any

from src.config import settings
from src.core.logging import get_logger, setup_logging
from src.core.pharmacy.rules import DrugName, build_rule_table
from src.services.pharmacy_service import PharmacyService

logger = get_logger(__name__)

DEFAULT_DRUGS: list[dict[str, Any]] = [
    {"name": DrugName.DOLIPRANE.value, "expires_in": 20, "benefit": 30},
    {"name": DrugName.HERBAL_TEA.value, "expires_in": 10, "benefit": 5},
    {"name": DrugName.FERVEX.value, "expires_in": 5, "benefit": 40},
    {"name": DrugName.MAGIC_PILL.value, "expires_in": 15, "benefit": 40},
    {"name": DrugName.DAFALGAN.value, "expires_in": 5, "benefit": 20},
]


def run_simulation(service: PharmacyService, days: int) -> list[list[dict[str, Any]]]:
    """Advance `days` times; one snapshot per day."""
    if days < 0:
        raise ValueError(f"days must be >= 0, got {days}")
    history: list[list[dict[str, Any]]] = []
    for _ in range(days):
        service.update_benefit_value()
        history.append(service.snapshot())
    return history


def main() -> None:
    setup_logging(settings.LOG_LEVEL)
    service = PharmacyService.from_records(DEFAULT_DRUGS, build_rule_table())
    logger.info(
        "Simulating %d days for %d drugs",
        settings.SIMULATION_DAYS,
        len(service.drugs),
    )
    history = run_simulation(service, settings.SIMULATION_DAYS)
    print(json.dumps({"result": history}, indent=2))


if __name__ == "__main__":
    main()
