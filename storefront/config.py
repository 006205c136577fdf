"""
Configuration management for the storefront bot.
Loads settings from environment variables with validation.
"""

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.core.errors import MissingCredential


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    base_dir: Path = Path(__file__).parent.parent
    data_dir: Path = Path(__file__).parent.parent / "data"

    # Telegram
    bot_token: str = Field(
        default="",
        validation_alias=AliasChoices("BOT_TOKEN", "TELEGRAM_BOT_TOKEN"),
        description="Telegram Bot API token",
    )

    # Catalog
    catalog_path: Optional[Path] = Field(
        default=None, description="JSON catalog file (bundled demo catalog if unset)"
    )
    images_dir: Optional[Path] = Field(
        default=None, description="Directory with product images"
    )

    # Orders
    orders_dir: Optional[Path] = Field(
        default=None, description="Directory for exported XLSX orders"
    )
    export_orders: bool = Field(default=True, description="Export placed orders to XLSX")
    manager_chat_id: Optional[int] = Field(
        default=None, description="Telegram chat ID that receives placed orders"
    )

    # Debug
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def images_path(self) -> Path:
        """Directory product images are resolved against."""
        return self.images_dir or self.data_dir / "images"

    @property
    def orders_path(self) -> Path:
        """Directory for exported orders."""
        return self.orders_dir or self.data_dir / "orders"

    def require_token(self) -> str:
        """
        Return bot token.

        Raises:
            MissingCredential: token is not configured
        """
        token = self.bot_token.strip()
        if not token:
            raise MissingCredential()
        return token


# Global settings instance
settings = Settings()
