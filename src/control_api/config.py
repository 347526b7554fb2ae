"""Client configuration using pydantic-settings."""

from pathlib import Path

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


CONFIG_DIR = Path.home() / ".control-api"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


class Settings(BaseSettings):
    """
    Client settings.

    Priority (highest to lowest):
    1. Constructor arguments
    2. Environment variables (CONTROL_API_ENDPOINT, CONTROL_API_TOKEN, ...)
    3. .env file in the working directory
    4. Config file (~/.control-api/config.yaml)
    5. Defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTROL_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    endpoint: str = ""
    token: str = ""

    # Seconds
    timeout: float = 30.0

    debug: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # CONFIG_FILE is read at load time so it can be redirected
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=CONFIG_FILE),
        )

    def validate_config(self) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if not self.endpoint:
            errors.append("endpoint not configured. Set CONTROL_API_ENDPOINT or 'endpoint' in " + str(CONFIG_FILE))
        if not self.token:
            errors.append("token not configured. Set CONTROL_API_TOKEN or 'token' in " + str(CONFIG_FILE))
        if self.timeout <= 0:
            errors.append("timeout must be positive")
        return errors

    @staticmethod
    def mask_token(token: str) -> str:
        """Mask a token for display."""
        if len(token) <= 8:
            return "*" * len(token)
        return token[:4] + "*" * (len(token) - 8) + token[-4:]


def get_settings() -> Settings:
    """Load the current settings."""
    return Settings()
