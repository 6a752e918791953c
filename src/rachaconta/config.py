from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rachaconta.services.strategy import Strategy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    strategy: Strategy = Field(Strategy.GREEDY, alias="RACHACONTA_STRATEGY")
    tolerance_per_head: Decimal = Field(Decimal("0.005"), alias="RACHACONTA_TOLERANCE_PER_HEAD", ge=0)
    strict: bool = Field(False, alias="RACHACONTA_STRICT")
    log_level: str = Field("WARNING", alias="RACHACONTA_LOG_LEVEL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
