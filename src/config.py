"""Application configuration loaded from environment variables and .env file."""

from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SIMULATION_MODES = ("utility", "probabilistic")


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Simulation defaults (POST /simulation/run 에서 생략한 값)
    SIMULATION_SEED: int = 42
    SIMULATION_TURNS: int = 20
    SIMULATION_MODE: str = "utility"
    SIMULATION_ACTORS: str = "npc-1,npc-2,npc-3"

    @field_validator("SIMULATION_MODE")
    @classmethod
    def _check_mode(cls, value: str) -> str:
        if value not in SIMULATION_MODES:
            raise ValueError(f"SIMULATION_MODE must be one of {SIMULATION_MODES}")
        return value

    @field_validator("SIMULATION_TURNS")
    @classmethod
    def _check_turns(cls, value: int) -> int:
        if value < 1:
            raise ValueError("SIMULATION_TURNS must be positive")
        return value

    @property
    def actor_ids(self) -> List[str]:
        """쉼표 구분 액터 목록"""
        return [a.strip() for a in self.SIMULATION_ACTORS.split(",") if a.strip()]


settings = Settings()
