# src/reports/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReportSettings(BaseSettings):
    API_URL: str = "http://localhost:3000"
    TOP_WORKPLACES_LIMIT: int = 3
    REQUEST_TIMEOUT_SECONDS: float = 10.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


report_settings = ReportSettings()
