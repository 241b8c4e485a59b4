from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

class Settings(BaseSettings):
    # Database; DB_URI wins over the individual parts when set
    DB_URI: str = ""
    DB_DRIVER: str = "postgresql+psycopg"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "devices"
    DB_CHECK_ON_STARTUP: bool = True
    DB_INIT: bool = False
    # HTTP listener
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    ROW_DECODE_POLICY: Literal["skip", "fail"] = "skip"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=[
            Path(__file__).resolve().parents[2] / ".env",
            Path(".env"),
        ],
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def database_url(self) -> str:
        if self.DB_URI.strip():
            return self.DB_URI.strip()
        url = URL.create(
            self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )
        return url.render_as_string(hide_password=False)

