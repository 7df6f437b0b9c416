"""
Configuration management for the Hello World plugin
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Plugin identity (reported to the host and by /status)
    plugin_name: str = "hc-hello-world-plugin"
    plugin_version: str = "2.0.0-sdk"

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8089
    api_reload: bool = False
    graphiql: bool = True

    # Resolver defaults
    users_default_limit: int = 10
    products_default_page_size: int = 5

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "HELLO_PLUGIN_"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()

if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        plugin_name=settings.plugin_name,
        environment=settings.environment,
    )
