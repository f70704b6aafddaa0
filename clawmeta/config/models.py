"""Configuration models for clawmeta."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from clawmeta.booleans import DEFAULT_FALSY, DEFAULT_TRUTHY


class MetadataConfig(BaseModel):
    """Where the embedded metadata payload lives."""

    frontmatter_field: str = Field(default="metadata", description="Frontmatter key holding the payload.")
    manifest_key: str = Field(default="openclaw", description="Namespace object inside the payload.")

    @field_validator("frontmatter_field", "manifest_key")
    @classmethod
    def key_not_empty(cls, v: str) -> str:
        value = v.strip()
        if not value:
            raise ValueError("metadata keys cannot be empty")
        return value


class BooleanConfig(BaseModel):
    """Tokens accepted by the permissive boolean parser."""

    truthy: list[str] = Field(default_factory=lambda: list(DEFAULT_TRUTHY))
    falsy: list[str] = Field(default_factory=lambda: list(DEFAULT_FALSY))

    @field_validator("truthy", "falsy")
    @classmethod
    def normalize_tokens(cls, v: list[str]) -> list[str]:
        tokens = [token.strip().lower() for token in v if token.strip()]
        if not tokens:
            raise ValueError("boolean token list cannot be empty")
        return tokens

    @model_validator(mode="after")
    def tokens_disjoint(self) -> BooleanConfig:
        overlap = set(self.truthy) & set(self.falsy)
        if overlap:
            raise ValueError(f"tokens cannot be both truthy and falsy: {sorted(overlap)}")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration for the command line."""

    level: str = Field(default="WARNING")

    @field_validator("level")
    @classmethod
    def level_known(cls, v: str) -> str:
        value = v.strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level: {v!r}")
        return value


class ClawmetaConfig(BaseSettings):
    """Root configuration model for clawmeta.

    Environment overrides (``CLAWMETA_<SECTION>__<KEY>``) are collected by
    ``load_config``; the model itself only validates the values it is given.
    """

    metadata: MetadataConfig = Field(default_factory=MetadataConfig)
    booleans: BooleanConfig = Field(default_factory=BooleanConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(extra="ignore")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)
