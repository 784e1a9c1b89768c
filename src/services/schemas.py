"""Drug boundary schemas — raw caller input is validated here, never in Core."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from src.core.pharmacy.models import BENEFIT_MAX, BENEFIT_MIN, Drug


class DrugRecord(BaseModel):
    """One (name, expires_in, benefit) triple as supplied by a caller."""

    model_config = ConfigDict(extra="forbid")

    name: StrictStr = Field(..., description="Drug name, selects the rule")
    expires_in: StrictInt = Field(..., description="Days until expiry")
    benefit: StrictInt = Field(..., ge=BENEFIT_MIN, le=BENEFIT_MAX)

    def to_drug(self) -> Drug:
        return Drug(name=self.name, expires_in=self.expires_in, benefit=self.benefit)

    @classmethod
    def from_drug(cls, drug: Drug) -> "DrugRecord":
        return cls(name=drug.name, expires_in=drug.expires_in, benefit=drug.benefit)
