from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Venue Dashboard API"
    membership_webhook_url: str = Field(
        default="https://n8n-production-8414.up.railway.app/webhook/Membership-Info"
    )
    membership_timeout_seconds: float = Field(default=5.0, gt=0)
    database_url: str = Field(default="sqlite:///./venue_dashboard.db")
    seed_demo_data: bool = Field(default=True)
    log_level: str = Field(default="INFO")


settings = Settings()
