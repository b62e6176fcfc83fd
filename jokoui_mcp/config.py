"""
Application configuration management using Pydantic Settings.

Every remote endpoint the catalog talks to is configurable so the service can be
pointed at a fork or a local mirror of the component repository.
"""
import logging
from typing import Literal, Optional
from urllib.parse import urlparse
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from dotenv import load_dotenv

# Load .env first
load_dotenv()

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Component catalog service settings"""

    # -------------------------
    # APPLICATION METADATA & RUNTIME
    # -------------------------
    app_name: str = "i-just-ask-jokoui"
    app_version: str = "2.0.0"
    api_title: str = "Joko UI Component Catalog API"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # -------------------------
    # REMOTE COMPONENT SOURCES
    # -------------------------
    site_base_url: str = "https://jokoui.web.id/components"
    listing_api_base_url: str = "https://api.github.com/repos/jokoui/jokoui/contents/components"
    raw_content_base_url: str = "https://raw.githubusercontent.com/jokoui/jokoui/main/components"
    source_extension: str = ".tsx"
    reserved_index_filenames: list[str] = ["index.ts", "index.tsx"]

    # -------------------------
    # HTTP CLIENT
    # -------------------------
    user_agent: str = "Mozilla/5.0 (compatible; I-Just-Ask-JokoUI/2.0)"
    request_timeout: float = 15.0

    # -------------------------
    # HTTP SERVER (FastAPI surface)
    # -------------------------
    http_host: str = "127.0.0.1"
    http_port: int = 8000

    # -------------------------
    # LOG FILES
    # -------------------------
    log_to_file: bool = False
    log_directory: str = "logs"
    log_rotation: str = "50 MB"
    log_retention: str = "7 days"

    # -------------------------
    # VALIDATORS
    # -------------------------
    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return str(v).upper()

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v: str) -> str:
        valid_envs = ["development", "staging", "production"]
        if v not in valid_envs:
            logger.warning(f"Invalid environment '{v}', defaulting to 'development'")
            return "development"
        return v

    @field_validator('site_base_url', 'listing_api_base_url', 'raw_content_base_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def site_host(self) -> Optional[str]:
        """Host part of the catalog site, used to recognise canonical component URLs."""
        return urlparse(self.site_base_url).hostname

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="JOKOUI_",
        validate_default=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    logger.info("Initializing settings...")
    return Settings()


settings = get_settings()
