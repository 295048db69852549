# src/pagination/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    MAX_SHARD: int = 9  # inclusive
    WORKERS_PAGE_SIZE: int = 10
    SHIFTS_PAGE_SIZE: int = 10
    WORKPLACES_PAGE_SIZE: int = 10

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


pagination_settings = PaginationSettings()
