"""
Configuration Management
Environment-based settings for the gateway, read once at startup
"""

from functools import lru_cache
from typing import List, Optional

import structlog
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger(__name__)

DEFAULT_CORS_ORIGINS = [
    "https://aimcs.net",
    "https://aimcs-frontend.azurewebsites.net",
    "https://aimcs-frontend-eastus2.azurewebsites.net",
    "http://localhost:5173",
    "http://localhost:3000",
]


class Settings(BaseSettings):
    """Gateway settings. Immutable once constructed."""

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Deployment mode, from NODE_ENV or ENVIRONMENT
    node_env: str = Field(
        default="development",
        validation_alias=AliasChoices("node_env", "NODE_ENV", "ENVIRONMENT"),
    )

    # Service info
    service_name: str = "AIMCS Backend API"
    service_version: str = "1.0.0"

    # Chat
    default_model: str = "gpt-4o-mini"
    chat_timeout_seconds: float = 30.0

    # CORS
    cors_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    cors_allow_methods: List[str] = Field(
        default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    cors_allow_headers: List[str] = Field(
        default_factory=lambda: ["Content-Type", "Authorization", "X-Requested-With"]
    )
    cors_max_age: int = 600

    # Request bodies
    max_body_bytes: int = 100 * 1024

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    logging_config_path: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("max_body_bytes")
    @classmethod
    def validate_max_body_bytes(cls, v):
        if v < 1:
            raise ValueError("MAX_BODY_BYTES must be positive")
        return v

    @field_validator("chat_timeout_seconds")
    @classmethod
    def validate_chat_timeout(cls, v):
        if v <= 0:
            raise ValueError("CHAT_TIMEOUT_SECONDS must be greater than zero")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        v = v.lower()
        if v not in ("json", "console"):
            raise ValueError("LOG_FORMAT must be 'json' or 'console'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        v = v.upper()
        if v not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return v

    @property
    def is_production(self) -> bool:
        return self.node_env.lower() == "production"

    @property
    def expose_error_details(self) -> bool:
        """Whether fault responses may carry the exception text"""
        return not self.is_production

    def log_config(self):
        """Log effective configuration"""
        logger.info(
            "Configuration loaded",
            service=self.service_name,
            version=self.service_version,
            host=self.host,
            port=self.port,
            environment=self.node_env,
            cors_origins=self.cors_origins,
            default_model=self.default_model,
            chat_timeout_seconds=self.chat_timeout_seconds,
            max_body_bytes=self.max_body_bytes,
        )


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance"""
    return Settings()
