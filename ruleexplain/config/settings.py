from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    channel_provider: str = "example"
    authority_provider: str = "static"

    rpc_url: str = "http://localhost:4000/api"
    rpc_timeout_seconds: int = 30
    contract_address: str = "0x471b16E3cCaBD84EE2905da9273bA193B2b46616"
    account_address: str = ""

    poll_interval_seconds: float = Field(default=2.0, ge=0)
    max_poll_attempts: int = Field(default=30, ge=1)
    # None or 0 waits for acceptance indefinitely
    acceptance_timeout_seconds: float | None = Field(default=300, ge=0)
    receipt_poll_interval_seconds: float = Field(default=1.0, ge=0)

    key_max_length: int = Field(default=60, ge=1)
    not_found_sentinel: str = "Explanation not found"

    example_ready_after_queries: int = Field(default=3, ge=0)
