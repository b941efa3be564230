"""
Configuration management for the Star Wars GraphQL API
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Query cost limits
    max_query_depth: int = 15
    max_query_complexity: int = 4000
    # Per-field multipliers for list fields, keyed by "Type.field".
    # Unlisted list fields count as 1.
    complexity_multipliers: dict[str, float] = {"Character.friends": 4}

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "STARWARS_"
        case_sensitive = False


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        environment=settings.environment,
        max_query_depth=settings.max_query_depth,
        max_query_complexity=settings.max_query_complexity,
        complexity_multipliers=settings.complexity_multipliers,
    )
