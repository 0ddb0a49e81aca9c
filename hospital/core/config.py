from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )
    PROJECT_NAME: str = "Hospital Management"
    API_V1_STR: str = "/api"
    # Prefix of the X-<name>-alert notification headers
    APPLICATION_NAME: str = "hospitalManagementApp"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    SQLALCHEMY_DATABASE_URI: str = "sqlite:///./hospital.db"
    LOG_LEVEL: str = "INFO"


settings = Settings()
