"""Battle rules for immunesim.

This package holds the in-memory battle model and the pure functions that
resolve fights:

* Dataclasses for combat groups and the roster (see :mod:`models`).
* Enumerations for factions and outcomes (see :mod:`enums`).
* Rule configuration objects (see :mod:`rules_config`).
* Target selection, attack execution and the round loop (see :mod:`battle`).
* The minimal winning boost search (see :mod:`boost`).
"""

from . import battle, boost, enums, models, rules_config

__all__ = [
    "battle",
    "boost",
    "enums",
    "models",
    "rules_config",
]
