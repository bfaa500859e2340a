"""
Configuration management for the food info agent.
Environment variables, an optional JSON config file, and typed settings.
"""

import os
import json
import logging
from dataclasses import dataclass
from typing import Dict, Any, Optional
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEMO_API_KEY = "DEMO_KEY"
DEFAULT_USDA_BASE_URL = "https://api.nal.usda.gov/fdc/v1"


@dataclass(frozen=True)
class Settings:
    """Read-only process settings shared by every request."""
    usda_api_key: str = DEMO_API_KEY
    usda_base_url: str = DEFAULT_USDA_BASE_URL
    usda_timeout: float = 10.0
    food_info_agent_id: str = "foodInfoAgent"
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    agent_version: str = "1.0.0"
    agent_org: str = "Your Organization"
    agent_org_url: str = "https://example.com"
    hu_app_url: str = ""


class ConfigManager:
    """
    Centralized configuration for the service.
    Handles environment variables, config files, and validation.
    """

    def __init__(self, config_file: Optional[str] = None, load_env: bool = True):
        """
        Initialize configuration manager.

        Args:
            config_file: Optional path to JSON config file
            load_env: Whether to load a .env file
        """
        self.config_file = config_file
        self.config_data: Dict[str, Any] = {}

        if load_env:
            self._load_environment()

        if config_file:
            self._load_config_file()

    def _load_environment(self):
        """Load environment variables from the first .env file found."""
        for env_file in (".env", ".env.local", ".env.production"):
            if os.path.exists(env_file):
                load_dotenv(env_file)
                logger.info(f"Loaded environment from {env_file}")
                break

    def _load_config_file(self):
        """Load configuration from JSON file."""
        if not os.path.exists(self.config_file):
            raise ValueError(f"Config file not found: {self.config_file}")

        with open(self.config_file, 'r') as f:
            self.config_data = json.load(f)
        logger.info(f"Loaded config from {self.config_file}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Priority: Environment > Config file > Default

        Args:
            key: Configuration key (supports dot notation)
            default: Default value if not found

        Returns:
            Configuration value
        """
        env_key = key.replace('.', '_').upper()
        env_value = os.getenv(env_key)
        if env_value is not None:
            return env_value

        current = self.config_data
        for part in key.split('.'):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default

        return current

    def get_settings(self) -> Settings:
        """
        Build the typed settings object.

        Returns:
            Frozen Settings instance
        """
        defaults = Settings()
        return Settings(
            usda_api_key=self.get("usda.api_key", defaults.usda_api_key),
            usda_base_url=str(self.get("usda.base_url", defaults.usda_base_url)).rstrip("/"),
            usda_timeout=float(self.get("usda.timeout", defaults.usda_timeout)),
            food_info_agent_id=self.get("food_info_agent_id", defaults.food_info_agent_id),
            host=self.get("host", defaults.host),
            port=int(self.get("port", defaults.port)),
            log_level=str(self.get("log_level", defaults.log_level)).upper(),
            agent_version=self.get("agent_version", defaults.agent_version),
            agent_org=self.get("agent_org", defaults.agent_org),
            agent_org_url=self.get("agent_org_url", defaults.agent_org_url),
            hu_app_url=self.get("hu_app_url", defaults.hu_app_url),
        )

    def validate(self) -> Dict[str, Any]:
        """
        Validate current configuration.

        Returns:
            Validation results
        """
        errors = []
        warnings = []

        settings = self.get_settings()
        if not settings.usda_api_key:
            errors.append("USDA_API_KEY is empty")
        elif settings.usda_api_key == DEMO_API_KEY:
            warnings.append("Using the rate-limited USDA DEMO_KEY")

        if settings.usda_timeout <= 0:
            errors.append(f"USDA_TIMEOUT must be positive, got {settings.usda_timeout}")

        if not settings.food_info_agent_id:
            errors.append("FOOD_INFO_AGENT_ID is empty")

        return {
            "valid": len(errors) == 0,
            "errors": errors,
            "warnings": warnings
        }


def get_settings(config_file: Optional[str] = None) -> Settings:
    """
    Load settings and log any validation findings.

    Args:
        config_file: Optional path to JSON config file

    Returns:
        Frozen Settings instance

    Raises:
        ValueError: If the configuration is invalid
    """
    manager = ConfigManager(config_file=config_file)
    result = manager.validate()

    for warning in result["warnings"]:
        logger.warning(f"⚠️ {warning}")

    if not result["valid"]:
        raise ValueError(f"Invalid configuration: {result['errors']}")

    return manager.get_settings()
