import os
from typing import List, Literal, Mapping, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

ENV_PREFIX = "TRAFFIC_"


class Settings(BaseModel):
    min_capacity_floor: int = Field(1, ge=0)
    max_capacity_ceiling: int = Field(100, ge=1)
    leaderboard_size: int = Field(10, ge=1)
    results_limit: int = Field(100, ge=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    cors_origins: List[str] = ["*"]

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @model_validator(mode="after")
    def check_capacity_bounds(self) -> "Settings":
        if self.min_capacity_floor >= self.max_capacity_ceiling:
            raise ValueError(f"min_capacity_floor {self.min_capacity_floor} must be below "
                             f"max_capacity_ceiling {self.max_capacity_ceiling}")
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read ``TRAFFIC_*`` variables; unset ones keep their defaults."""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is None:
                continue
            if name == "cors_origins":
                values[name] = [o.strip() for o in raw.split(",") if o.strip()]
            else:
                values[name] = raw
        return cls(**values)
