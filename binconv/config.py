import json
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "BinConv Radix Service"
    debug: bool = Field(default=False, alias="BinConv_Debug")
    api_version: str = Field(default="1.0.0", alias="BinConv_AppVersion")

    strict_decode: bool = Field(default=False, alias="BinConv_StrictDecode")
    int_bits: Optional[int] = Field(default=None, alias="BinConv_IntBits")
    max_batch_size: int = Field(default=256, ge=1, alias="BinConv_MaxBatchSize")

    # Comma separated list or JSON array.
    cors_origins: str = Field(default="", alias="BinConv_AllowedOrigins")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        populate_by_name=True,
    )

    @field_validator("int_bits", mode="before")
    @classmethod
    def _parse_int_bits(cls, value):
        if value in (None, ""):
            return None
        bits = int(value)
        if bits < 2:
            raise ValueError("BinConv_IntBits must be at least 2")
        return bits

    @property
    def allowed_origins(self) -> List[str]:
        raw = self.cors_origins.strip()
        parsed = None
        if raw.startswith("[") and raw.endswith("]"):
            try:
                parsed = json.loads(raw)
            except json.JSONDecodeError:
                parsed = None
        if isinstance(parsed, list):
            items = [str(item) for item in parsed]
        else:
            items = raw.split(",")

        origins: List[str] = []
        for item in items:
            candidate = item.strip()
            if not candidate:
                continue
            if candidate == "*":
                return ["*"]
            if candidate not in origins:
                origins.append(candidate)
        return origins or ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
