# app/core/config.py

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DASHBOARD_",
        env_file=".env",
        extra="ignore",
    )

    database_url: str = "sqlite:///db.sqlite"  # file in project root

    # Views that get revalidated / redirected to after a mutation
    dashboard_path: str = "/dashboard"
    invoices_path: str = "/dashboard/invoices"
    customers_path: str = "/dashboard/customers"

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
