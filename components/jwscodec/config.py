from __future__ import annotations
import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class JwsSettings(BaseSettings):
    """
    Codec knobs. Secrets never live here: keys are passed to each encode/decode call.
    Read from JWS_* env vars (or .env) only when a caller constructs JwsSettings().
    """
    model_config = SettingsConfigDict(
        env_prefix="JWS_", env_file=".env", case_sensitive=False, extra="ignore", frozen=True
    )

    # None means no cap; set it to bound decode work on untrusted input.
    max_token_length: Optional[int] = Field(default=None, gt=0)
    rejection_log_level: str = Field(default="INFO")

    @field_validator("rejection_log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        name = v.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {v}")
        return name

    @property
    def rejection_level_no(self) -> int:
        return logging.getLevelName(self.rejection_log_level)
