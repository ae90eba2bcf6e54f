"""
Process-wide settings, read from the environment and an optional .env file.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    LOG_LEVEL: str = "WARNING"

    # File name reported in diagnostic locations when the script has no path
    CONFIG_FILENAME: str = "copy.bara.sky"
    DEFAULT_WORKFLOW: str = "default"

    # Seconds; None disables the SIGALRM guard around script execution
    SCRIPT_EXEC_TIMEOUT: int | None = None

    # Comma-separated keys readable through the `env` script module
    SCRIPT_ENV_WHITELIST: str = "ENVIRONMENT,DEFAULT_WORKFLOW"

    @property
    def env_whitelist(self) -> frozenset[str]:
        return frozenset(
            k.strip() for k in self.SCRIPT_ENV_WHITELIST.split(",") if k.strip()
        )


settings = Settings()
