"""Configuration management using Pydantic Settings"""
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_GLOB = str(Path(__file__).parent.parent.parent.parent / "data" / "units" / "*.json")


class UnitDataConfig(BaseSettings):
    """Unit data file configuration"""
    data_glob: str = Field(default=DEFAULT_DATA_GLOB, alias="UOM_DATA_GLOB")
    load_on_startup: bool = Field(default=True, alias="UOM_LOAD_ON_STARTUP")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class AppConfig(BaseSettings):
    """Application configuration"""
    name: str = Field(default="uom-convert", alias="APP_NAME")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class Settings(BaseSettings):
    """Global settings"""
    units: UnitDataConfig = Field(default_factory=UnitDataConfig)
    app: AppConfig = Field(default_factory=AppConfig)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


# Global settings instance
settings = Settings()
