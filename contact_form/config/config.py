import functools

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmailSettings(BaseSettings):
    SENDGRID_API_KEY: str | None = Field(default=None)
    EMAIL_FROM: str = Field(...)
    EMAIL_FROM_NAME: str = Field(default="Website Contact Form")
    CONTACT_EMAIL: str = Field(...)

    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    @property
    def is_configured(self) -> bool:
        """True when a SendGrid API key has been supplied"""
        return bool(self.SENDGRID_API_KEY and self.SENDGRID_API_KEY.strip())


class CorsSettings(BaseSettings):
    # comma separated list, e.g. "https://example.com,https://staging.example.com"
    ALLOWED_ORIGINS: str = Field(default="http://localhost:3000")
    CORS_MAX_AGE: int = Field(default=3600)

    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    @property
    def origins(self) -> list[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(',') if origin.strip()]


class Logging(BaseSettings):
    LOG_LEVEL: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')


class Settings(BaseSettings):
    APP_NAME: str = Field(default="contact-form")
    ENVIRONMENT: str = Field(default="development")
    DEVELOPMENT_SERVER_NAME: str = Field(default="localhost")
    PORT: int = Field(default=8080)
    EMAIL_SETTINGS: EmailSettings = Field(default_factory=EmailSettings)
    CORS_SETTINGS: CorsSettings = Field(default_factory=CorsSettings)
    LOGGING: Logging = Field(default_factory=Logging)

    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')


@functools.lru_cache
def config_instance() -> Settings:
    return Settings()
