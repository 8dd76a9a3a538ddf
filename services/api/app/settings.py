"""Application configuration loaded from environment variables."""

from pydantic import BaseModel
import os


class Settings(BaseModel):
    """Typed settings with defaults for local development."""

    app_env: str = os.getenv("APP_ENV", "dev")
    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:3000")
    public_base_url: str = os.getenv("PUBLIC_BASE_URL", "http://localhost:3000")
    resend_api_key: str | None = os.getenv("RESEND_API_KEY")
    email_from: str = os.getenv("EMAIL_FROM", "noreply@resend.dev")
    email_timeout: float = float(os.getenv("EMAIL_TIMEOUT", "10"))

    @property
    def cors_origins_list(self) -> list[str]:
        """Return CORS origins as a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
