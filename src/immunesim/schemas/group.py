from pydantic import BaseModel, Field, model_validator

from immunesim.domain.enums import Faction
from immunesim.domain.models import CombatGroup


class GroupCreate(BaseModel):
    faction: Faction = Field(..., description="Side the group fights for")
    units: int = Field(..., ge=0, description="Number of units in the group")
    hit_points: int = Field(..., ge=1, description="Hit points of every unit")
    attack_damage: int = Field(..., ge=1, description="Base damage dealt per unit")
    attack_type: str = Field(..., min_length=1, description="Element of the group's attack")
    initiative: int = Field(..., description="Higher initiative attacks first")
    weaknesses: list[str] = Field(
        default_factory=list, description="Attack types dealing double damage"
    )
    immunities: list[str] = Field(
        default_factory=list, description="Attack types dealing no damage"
    )

    @model_validator(mode="after")
    def _check_disjoint(self) -> "GroupCreate":
        overlap = set(self.weaknesses) & set(self.immunities)
        if overlap:
            raise ValueError(
                f"attack types cannot be both weakness and immunity: {sorted(overlap)}"
            )
        return self

    def to_domain(self) -> CombatGroup:
        return CombatGroup(
            faction=self.faction,
            unit_count=self.units,
            hit_points_per_unit=self.hit_points,
            attack_damage=self.attack_damage,
            attack_type=self.attack_type,
            initiative=self.initiative,
            weaknesses=frozenset(self.weaknesses),
            immunities=frozenset(self.immunities),
        )

    @classmethod
    def from_domain(cls, group: CombatGroup) -> "GroupCreate":
        return cls(
            faction=group.faction,
            units=group.unit_count,
            hit_points=group.hit_points_per_unit,
            attack_damage=group.attack_damage,
            attack_type=group.attack_type,
            initiative=group.initiative,
            weaknesses=sorted(group.weaknesses),
            immunities=sorted(group.immunities),
        )
