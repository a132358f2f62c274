"""Application configuration.

Loads settings from environment variables (``CATALOG_ADMIN_`` prefix)
and an optional ``.env`` file, with sensible defaults.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Catalog admin settings loaded from environment variables."""

    # Product store
    store_base_url: str = Field(
        default="http://localhost:5000/api",
        description="Product store base URL",
    )
    store_api_key: str | None = Field(
        default=None,
        description="Optional bearer token for the product store",
    )
    request_timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    # Catalog view
    page_size: int = Field(default=9, ge=1, description="Products per page")
    placeholder_image: str = Field(
        default="/logo.png",
        description="Thumbnail used for products without images",
    )
    catalogue_document: str = Field(
        default="/catalogue.pdf",
        description="Locator of the pre-built catalogue document",
    )
    login_redirect: str = Field(default="/", description="Where to send users without a session")

    # Export
    currency_symbol: str = Field(default="₹", description="Price column prefix")
    export_date_format: str = Field(
        default="%d-%m-%Y",
        description="strftime pattern for the export file name date",
    )
    export_dir: str = Field(default="exports", description="Directory used by the file export sink")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render logs as JSON")

    model_config = {
        "env_prefix": "CATALOG_ADMIN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    return Settings()


settings = get_settings()
