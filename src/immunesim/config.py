"""Lightweight configuration for the immunesim tools."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from immunesim.domain.enums import Faction
from immunesim.domain.rules_config import BattleRules, BoostSearchRules, RulesConfig


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(
        env_prefix="IMMUNESIM_", env_file=".env", env_file_encoding="utf-8"
    )

    scenario_dir: Path = Field(default=Path("scenarios"), description="Where scenario files live")
    log_level: str = Field(default="INFO", description="Root logging level for the CLI")
    boosted_faction: Faction = Field(
        default=Faction.IMMUNE_SYSTEM, description="Faction receiving the attack boost"
    )
    boost_ceiling: int = Field(
        default=1_000_000,
        description="Largest boost tried when searching for the minimal winning boost",
        gt=0,
    )

    def rules(self) -> RulesConfig:
        """Rule configuration reflecting these settings."""

        return RulesConfig(
            battle=BattleRules(boosted_faction=self.boosted_faction),
            boost_search=BoostSearchRules(ceiling_limit=self.boost_ceiling),
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
