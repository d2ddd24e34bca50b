"""Runtime configuration settings for az-boards-md.

This module uses Pydantic Settings for configuration that can be
overridden via environment variables. This provides:
- Type validation
- Environment variable support (AZ_BOARDS_MD_ prefix)
- Default values
- Easy testing via dependency injection
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from az_boards_md.constants import AZ_DEFAULT_EXECUTABLE, DEFAULT_API_VERSION


class AzureCliSettings(BaseSettings):
    """Azure CLI invocation settings.

    Can be overridden via environment variables with AZ_BOARDS_MD_AZ_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="AZ_BOARDS_MD_AZ_", env_file=".env", extra="ignore"
    )

    executable: str = Field(
        default=AZ_DEFAULT_EXECUTABLE,
        description="Azure CLI executable name or path",
    )
    command_timeout_seconds: float | None = Field(
        default=None,
        description="Timeout for az commands in seconds (no timeout when unset)",
    )


class ApiSettings(BaseSettings):
    """Azure DevOps REST API settings.

    Can be overridden via environment variables with AZ_BOARDS_MD_API_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="AZ_BOARDS_MD_API_", env_file=".env", extra="ignore"
    )

    version: str = Field(
        default=DEFAULT_API_VERSION,
        description="Default api-version query parameter for REST calls",
    )


# Singleton instances for easy import
az_cli_settings = AzureCliSettings()
api_settings = ApiSettings()
