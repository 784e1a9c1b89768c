"""Drug domain model (pure Python, no I/O)"""

from __future__ import annotations

from dataclasses import dataclass

BENEFIT_MIN = 0
BENEFIT_MAX = 50


@dataclass
class Drug:
    """A drug on the shelf. Only `expires_in` and `benefit` change between days."""

    name: str  # rule lookup key, not unique within a batch
    expires_in: int  # days until expiry, negative once past it
    benefit: int  # BENEFIT_MIN ~ BENEFIT_MAX


def clamp_benefit(value: int) -> int:
    """Bound a benefit value to [BENEFIT_MIN, BENEFIT_MAX]."""
    return max(BENEFIT_MIN, min(BENEFIT_MAX, value))
