from pydantic import BaseModel, Field

from immunesim.domain.models import Roster

from .group import GroupCreate


class ScenarioCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Name of the scenario")
    description: str | None = Field(None, description="Free-form notes about the scenario")
    boost: int = Field(default=0, ge=0, description="Attack boost for the boosted faction")
    groups: list[GroupCreate] = Field(..., min_length=1, description="Groups in roster order")

    def build_roster(self) -> Roster:
        """Build a fresh roster; identifiers follow the order of ``groups``."""

        return Roster.from_groups(group.to_domain() for group in self.groups)
