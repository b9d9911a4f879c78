import json
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from flyby.logging import get_logger

logger = get_logger(__name__)

DEMO_API_KEY = "DEMO_KEY"


class AuthenticationSettings(BaseSettings):
    """
    Authentication settings for the NASA imagery API.

    Credential sources (in order of priority):
    1. Constructor argument or environment variable (FLYBY_API_KEY)
    2. .env file in current directory
    3. JSON file at secrets_path or ~/.flyby/<environment>/api-key.json

    When none of these yield a key, NASA's rate-limited DEMO_KEY is used.
    """

    api_key: str | None = Field(None)
    environment: str = Field("default")
    secrets_path: str | None = Field(None)

    model_config = SettingsConfigDict(
        env_prefix="FLYBY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(
        self,
        api_key: str | None = None,
        environment: str | None = None,
        secrets_path: str | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)

        if api_key is not None:
            self.api_key = api_key
        if environment is not None:
            self.environment = environment
        if secrets_path is not None:
            self.secrets_path = secrets_path

        if not self.api_key:
            self._load_from_json_file()

    def _load_from_json_file(self) -> None:
        """Load the API key from a JSON file if one exists."""
        if self.secrets_path:
            file_path = Path(self.secrets_path)
        else:
            file_path = Path.home() / ".flyby" / self.environment / "api-key.json"

        if not file_path.exists():
            return

        try:
            with open(file_path, "r") as f:
                secrets_data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not read API key from {file_path}: {e}")
            return

        if isinstance(secrets_data, dict):
            self.api_key = secrets_data.get("api_key")

    @property
    def is_authenticated(self) -> bool:
        """Check if a personal API key is set."""
        return bool(self.api_key)

    def get_api_key(self) -> str:
        if self.is_authenticated:
            return self.api_key
        logger.warning(
            "No API key configured, falling back to the rate-limited DEMO_KEY. "
            "Set FLYBY_API_KEY to use your own key."
        )
        return DEMO_API_KEY
