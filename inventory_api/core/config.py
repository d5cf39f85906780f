# File: inventory_api/core/config.py

import os
from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "Inventory API"
    VERSION: str = "0.3.0"

    api_prefix: str = "/api"

    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # CORS (comma separated in the environment)
    backend_cors_origins: List[str] = os.getenv("CORS_ORIGINS", "*")

    # Document store
    mongodb_uri: Optional[str] = os.getenv("MONGODB_URI") or None
    database_name: str = os.getenv("MONGODB_DB", "inventory")
    server_selection_timeout_ms: int = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))

    # Password hashing work factor
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("bcrypt_rounds")
    @classmethod
    def check_bcrypt_rounds(cls, v: int) -> int:
        # bcrypt only accepts cost factors in this range
        if not 4 <= v <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
