import os
from typing import Literal, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

load_dotenv()

ENV_PREFIX = "BSEARCH_"

MIN_ARRAY_SIZE = 1
MAX_ARRAY_SIZE = 64
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SearchSettings(BaseModel):
    array_size: int = Field(12, ge=MIN_ARRAY_SIZE, le=MAX_ARRAY_SIZE, description="Length of generated sequences")
    min_value: int = Field(2, description="Lower bound for generated values")
    max_value: int = Field(90, description="Upper bound for generated values")
    seed: int = Field(9473, description="Seed for the sequence generator")
    variant: Literal["recursive", "iterative"] = "recursive"
    log_level: str = Field("WARNING", description="Logging level name, e.g. DEBUG")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        name = v.upper()
        if name not in LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return name

    @model_validator(mode="after")
    def _values_fit(self):
        if self.max_value - self.min_value + 1 < self.array_size:
            raise ValueError(
                f"[{self.min_value}, {self.max_value}] cannot hold {self.array_size} distinct values"
            )
        return self


def load_settings(env: Optional[Mapping[str, str]] = None) -> SearchSettings:
    env = os.environ if env is None else env
    raw = {}
    for name in SearchSettings.model_fields:
        value = env.get(ENV_PREFIX + name.upper())
        if value is not None and value.strip():
            raw[name] = value.strip()
    return SearchSettings(**raw)
