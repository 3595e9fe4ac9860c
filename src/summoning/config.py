"""Runtime configuration for the summoning tools."""

from __future__ import annotations

from dataclasses import replace
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from summoning.domain.enums import PlayerType, SearchPolicy
from summoning.domain.rules_config import DEFAULT_RULES, N_PLAYERS, RulesConfig

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings, read from ``SUMMONING_*`` variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SUMMONING_",
        extra="ignore",
    )

    seed: int | None = Field(default=None, description="Board seed; random when unset")
    roster: list[PlayerType] = Field(
        default_factory=lambda: list(DEFAULT_RULES.turn.default_roster),
        description="Seat activity flags, seat 1 first",
    )
    search_policy: SearchPolicy = Field(
        default=DEFAULT_RULES.split.search_policy,
        description="Whether directional searches pass over blocked cells",
    )
    region_radius: float = Field(
        default=DEFAULT_RULES.map.region_radius,
        gt=0.0,
        description="World-space radius around the board centre that is part of the map",
    )
    log_level: LogLevel = Field(default="WARNING", description="Root logging level")

    @field_validator("roster")
    @classmethod
    def _roster_has_every_seat(cls, value: list[PlayerType]) -> list[PlayerType]:
        if len(value) != N_PLAYERS:
            raise ValueError(f"roster must list {N_PLAYERS} seats, got {len(value)}")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    def build_rules(self, base: RulesConfig = DEFAULT_RULES) -> RulesConfig:
        """Overlay these settings on a rules configuration."""

        return replace(
            base,
            map=replace(base.map, region_radius=self.region_radius),
            split=replace(base.split, search_policy=self.search_policy),
            turn=replace(base.turn, default_roster=tuple(self.roster)),
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
