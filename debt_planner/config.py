"""Configuration management using Pydantic Settings"""

from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./debt_planner.db"

    # Debt records: read from the local store or the remote accounts service
    debt_source: Literal["database", "http"] = "database"
    accounts_api_base: str = "http://localhost:8001"

    # Service
    service_name: str = "debt-planner"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0

    # Revolving credit minimum payment policy: max(rate * balance, floor)
    revolving_min_payment_rate: float = 0.03
    revolving_min_payment_floor: float = 50.0

    # Simulation
    payment_accelerator: float = 1.10  # Default budget = total minimums * accelerator
    max_simulation_months: int = 600  # 50 years
    paid_off_epsilon: float = 0.01
    interest_decimals: int = 0
    compare_timeout_seconds: float = 10.0


settings = Settings()
