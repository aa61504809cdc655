import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationError

UNKNOWN_POLICIES = ("sentinel", "drop")


class EngineConfig(BaseModel):
    """Transliteration engine configuration with validation."""

    charset: str = "ASCII"
    on_unknown: str = "sentinel"
    extra_table_dirs: list[str] = Field(default_factory=list)
    preload_blocks: list[int] = Field(default_factory=list)

    @field_validator('charset')
    @classmethod
    def validate_charset(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ConfigurationError("charset cannot be empty", code="E_CHARSET")
        return v

    @field_validator('on_unknown')
    @classmethod
    def validate_on_unknown(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in UNKNOWN_POLICIES:
            raise ConfigurationError(
                f"on_unknown must be one of {', '.join(UNKNOWN_POLICIES)}, got {v!r}",
                code="E_POLICY",
            )
        return v

    @field_validator('extra_table_dirs')
    @classmethod
    def validate_table_dirs(cls, v: list[str]) -> list[str]:
        for path in v:
            if not Path(path).is_dir():
                raise ConfigurationError(f"Table directory not found: {path}")
        return v

    @field_validator('preload_blocks')
    @classmethod
    def validate_preload_blocks(cls, v: list[int]) -> list[int]:
        for block in v:
            if not 0 <= block <= 0xFF:
                raise ConfigurationError(f"Block must be 0-255, got {block}")
        return v


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_bytes: int = 10485760
    backup_count: int = 5

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigurationError(f"Unknown log level: {v}")
        return v


class TranslitConfig(BaseSettings):
    engine: EngineConfig = Field(default_factory=EngineConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="UNITRANSLIT_",
        env_nested_delimiter="__",
    )

    @classmethod
    def from_toml(cls, path: str | Path) -> "TranslitConfig":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = toml.load(f)

        return cls(**data)


_config: Optional[TranslitConfig] = None


def load_config(path: Optional[str | Path] = None) -> TranslitConfig:
    global _config
    if _config is None:
        if path is None:
            path = os.environ.get("UNITRANSLIT_CONFIG", "unitranslit.toml")

        config_path = Path(path)
        if config_path.exists():
            _config = TranslitConfig.from_toml(config_path)
        else:
            _config = TranslitConfig()

    return _config


def get_config() -> TranslitConfig:
    if _config is None:
        return load_config()
    return _config


def reset_config() -> None:
    global _config
    _config = None
