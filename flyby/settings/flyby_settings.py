from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from flyby.settings.authentication import AuthenticationSettings


class FlyBySettings(BaseSettings):
    api_url: str = Field(
        default="https://api.nasa.gov", description="Base URL for the NASA API"
    )

    assets_path: str = Field(
        default="planetary/earth/assets",
        description="Path of the Earth imagery assets endpoint",
    )

    request_timeout: float | None = Field(
        default=None,
        description="Seconds to wait for the catalog to respond, None waits forever",
    )

    auth: AuthenticationSettings = Field(
        default_factory=AuthenticationSettings,
        description="Authentication settings for the NASA API",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="FLYBY_",
    )
