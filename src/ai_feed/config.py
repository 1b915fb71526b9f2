# ============================================================================
# AI Content Feed - Application Configuration
# ============================================================================
"""
Application configuration module using Pydantic Settings.

This module defines all configuration parameters for the feed service:
- API/CORS settings
- Logging
- Database connection
- Feed rendering (site timezone, display templates)

Usage:
    from ai_feed.config import settings
    template_dir = settings.template_path
"""

from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    # =========================================================================
    # API SETTINGS
    # =========================================================================
    api_title: str = "AI Content Feed"
    api_version: str = "1.0.0"
    debug: bool = Field(default=False, description="Echo SQL & include error detail in 500 responses")
    log_level: str = Field(default="INFO", description="Logging level")

    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: List[str] = Field(
        default=["*"],
        description="Allowed origins for CORS",
    )

    # =========================================================================
    # DATABASE CONFIGURATION
    # =========================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/ai_feed.db",
        description="SQLAlchemy async database URL",
    )
    auto_create_tables: bool = Field(default=True, description="Create missing tables on startup")

    # =========================================================================
    # FEED CONFIGURATION
    # =========================================================================
    site_timezone: str = Field(default="UTC", description="Timezone used for feed timestamps")
    template_dir: Optional[str] = Field(
        default=None,
        description="Directory of display templates (defaults to the bundled templates)",
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @property
    def template_path(self) -> Path:
        if self.template_dir:
            return Path(self.template_dir)
        return PACKAGE_DIR / "templates" / "display"


# Global settings instance (imported elsewhere)
settings = Settings()
