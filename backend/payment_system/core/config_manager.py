from typing import Optional
import logging
from pydantic_settings import BaseSettings, SettingsConfigDict
from payment_system.core.patterns.singleton import Singleton


class Settings(BaseSettings):
    """Application settings using Pydantic BaseSettings."""

    # Application
    app_name: str = "Payment System"
    version: str = "1.0.0"

    # Development Settings
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="PAYMENT_",
        env_file=".env",
        extra="ignore",
    )


class ConfigManager(Singleton):
    """
    Singleton Configuration Manager.

    Loads settings from the environment (``PAYMENT_*`` variables) and an
    optional ``.env`` file, and hands them out to the rest of the application.
    """

    def _setup(self):
        """Initialize the configuration manager."""
        self._settings: Optional[Settings] = None
        self._logger = logging.getLogger(__name__)
        self._load_settings()

    def _load_settings(self):
        """Load settings from environment variables and .env file."""
        try:
            self._settings = Settings()
            self._logger.info(f"Configuration loaded successfully. Debug mode: {self._settings.debug}")
        except Exception as e:
            self._logger.error(f"Failed to load configuration: {e}")
            raise

    @property
    def settings(self) -> Settings:
        """Get the application settings."""
        if self._settings is None:
            self._load_settings()
        return self._settings

    def reload_settings(self):
        """Reload settings from environment variables and .env file."""
        self._logger.info("Reloading configuration settings...")
        self._load_settings()

    def is_debug_mode(self) -> bool:
        """Check if the application is in debug mode."""
        return self.settings.debug

    def get_log_level(self) -> int:
        """Resolve the configured log level name to a logging constant."""
        return getattr(logging, self.settings.log_level.upper(), logging.INFO)

    def get_server_settings(self) -> dict:
        """Get server configuration settings."""
        return {
            "app_name": self.settings.app_name,
            "version": self.settings.version,
            "debug": self.settings.debug,
            "log_level": self.settings.log_level,
        }


# Create the global config manager instance
config_manager = ConfigManager.get_instance()

# Expose settings directly for convenience
settings = config_manager.settings
