"""
Configuration management for Bookshelf backend
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BOOKSHELF_",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GraphQL
    graphiql: bool = True  # Serve the GraphiQL IDE on GET /graphql
    max_query_depth: int = 10  # Author <-> Book nesting is unbounded otherwise

    # Data store
    seed_data: bool = True  # Start the in-memory store with the sample catalogue

    # Logging
    debug: bool = True
    log_level: str = "INFO"


# Global settings instance
settings = Settings()

