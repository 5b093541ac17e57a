"""
Configuration management for LinkSnatcher.
"""
import os


class Settings:
    """Application settings with environment variable support."""

    # Video resolution API
    rapidapi_env_var: str = "RAPIDAPI_KEY"

    # Application settings
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def rapidapi_key(self) -> str:
        """Service credential, read at request time. Empty when unset."""
        return os.getenv(self.rapidapi_env_var, "")


# Global settings instance
settings = Settings()
