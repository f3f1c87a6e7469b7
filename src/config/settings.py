"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MDLIVE_ prefix (e.g., MDLIVE_SERVER_PORT=9000).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use MDLIVE_ prefix.

    Examples:
        MDLIVE_SERVER_HOST=127.0.0.1
        MDLIVE_SERVER_PORT=9000
        MDLIVE_RELOAD_POLL_INTERVAL=0.25
    """

    model_config = SettingsConfigDict(
        env_prefix="MDLIVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Live server configuration
    server_host: str = Field(
        default="0.0.0.0",
        description="Interface the live server binds to",
    )

    server_port: int = Field(
        default=8080,
        description="Port the live server listens on",
    )

    reload_poll_interval: float = Field(
        default=0.1,
        gt=0,
        description="Seconds between reload-signal checks in a /reload request",
    )

    not_found_html: str = Field(
        default="<p>File not found</p>",
        description="Body served when the rendered output cannot be read",
    )

    # Source configuration
    source_encoding: str = Field(
        default="utf-8",
        description="Encoding used to read markup sources, style sheets and rendered output",
    )

    def serverURL_make(self) -> str:
        """
        Human-facing URL of the live server.

        Returns:
            URL string, using localhost when bound to all interfaces

        Example:
            >>> AppSettings().serverURL_make()
            'http://localhost:8080'
        """
        host = "localhost" if self.server_host in ("0.0.0.0", "") else self.server_host
        return f"http://{host}:{self.server_port}"


# Singleton instance - import this in your code
appsettings = AppSettings()
