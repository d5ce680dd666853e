"""
Configuration management for the peoplegraph server
"""

from pathlib import Path

from pydantic_settings import BaseSettings

# Static assets shipped with the package (GraphiQL fetcher, stylesheets)
BUNDLED_WEB_ROOT = Path(__file__).parent / "webroot"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:8080"]
    https_redirect: bool = False

    # Static files
    content_root: str = "."
    web_root: str | None = None  # None serves the bundled webroot/

    # GraphQL
    graphql_path: str = "/graphql-app"

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"
    expose_error_details: bool = True

    class Config:
        env_file = ".env"
        env_prefix = "PEOPLEGRAPH_"
        case_sensitive = False


# Global settings instance
settings = Settings()


def resolve_web_root(app_settings: Settings | None = None) -> Path:
    """Get the static files directory, relative paths resolved against content_root."""
    app_settings = app_settings or settings
    if app_settings.web_root is None:
        return BUNDLED_WEB_ROOT
    web_root = Path(app_settings.web_root)
    if not web_root.is_absolute():
        web_root = Path(app_settings.content_root).resolve() / web_root
    return web_root
