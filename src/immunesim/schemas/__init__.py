from .group import GroupCreate
from .scenario import ScenarioCreate

__all__ = [
    "GroupCreate",
    "ScenarioCreate",
]
