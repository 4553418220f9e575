"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine configuration loaded from LOAN_ELIGIBILITY_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="LOAN_ELIGIBILITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service
    service_name: str = "loan-eligibility"
    log_level: str = "INFO"

    # Rate policy used when the caller supplies no expected EMI
    default_annual_rate_pct: float = 12.0


settings = Settings()
