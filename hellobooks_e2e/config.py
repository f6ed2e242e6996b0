"""
Environment Variable Configuration for the E2E Suite

Centralizes every environment-specific setting the suite needs:
- Base URL selection (dev / beta / example) with explicit override
- Seed and scenario credentials
- Browser settings (headless, slow-mo, video, screenshots)
- Named timeouts used by the interaction helpers

Usage:
    from hellobooks_e2e.config import Config, Timeouts, validate_config

    base_url = Config.BASE_URL
    email = Config.E2E_EMAIL

    # Validate all at session start (raises ConfigError if invalid)
    validate_config()
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")

ENVIRONMENT_URLS = {
    "dev": "https://dev.hellobooks.ai",
    "beta": "https://beta.hellobooks.ai",
    "example": "https://hellobooks.example.com",
}


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


class Timeouts:
    """Named waits, in milliseconds."""

    OPTIONAL_ACTION = 5000
    SAFE_VISIBLE = 5000
    FIELD = 10000
    BUTTON = 10000
    DROPDOWN = 10000
    DROPDOWN_RENDER = 500
    TOAST = 10000
    ROUTE = 15000
    REDIRECT = 20000
    SEED_LOGIN = 30000
    SETTLE = 1000

    # Whole-scenario ceiling, in seconds
    SCENARIO_BUDGET = 120


@dataclass
class EnvVar:
    """Environment variable definition with validation."""

    name: str
    default: Any = None
    var_type: str = "str"  # str, int, bool, path
    required: bool = False
    description: str = ""
    min_value: Optional[int] = None
    max_value: Optional[int] = None
    choices: Optional[List[Any]] = None
    pattern: Optional[str] = None
    sensitive: bool = False

    def parse(self, value: str) -> Any:
        """Parse string value to target type."""
        if value is None:
            return None

        if self.var_type == "str":
            return value
        elif self.var_type == "int":
            try:
                return int(value)
            except ValueError:
                raise ConfigError(f"{self.name}: '{value}' is not a valid integer")
        elif self.var_type == "bool":
            return value.lower() in ("true", "1", "yes", "on")
        elif self.var_type == "path":
            path = Path(value)
            if not path.is_absolute():
                path = BASE_DIR / path
            return path
        else:
            return value

    def validate(self, value: Any) -> tuple[bool, str]:
        """Validate parsed value. Returns (is_valid, error_message)."""
        if value is None:
            if self.required:
                return False, f"{self.name} is required but not set"
            return True, ""

        if self.var_type == "int":
            if self.min_value is not None and value < self.min_value:
                return False, f"{self.name}: value {value} is below minimum {self.min_value}"
            if self.max_value is not None and value > self.max_value:
                return False, f"{self.name}: value {value} exceeds maximum {self.max_value}"

        if self.choices is not None and value not in self.choices:
            return (
                False,
                f"{self.name}: '{value}' is not a valid choice. Must be one of: {self.choices}",
            )

        if self.pattern and self.var_type == "str":
            if not re.match(self.pattern, value):
                return False, f"{self.name}: '{value}' does not match required pattern"

        return True, ""

    def get_value(self) -> Any:
        """Get validated value from environment."""
        raw_value = os.environ.get(self.name)

        if raw_value is None:
            if self.required:
                raise ConfigError(f"Required environment variable {self.name} is not set")
            return self.default

        parsed = self.parse(raw_value)
        is_valid, error = self.validate(parsed)

        if not is_valid:
            raise ConfigError(error)

        return parsed


ENV_VARS: Dict[str, EnvVar] = {
    # Environment selection
    "HELLOBOOKS_ENV": EnvVar(
        name="HELLOBOOKS_ENV",
        default="dev",
        choices=list(ENVIRONMENT_URLS),
        description="Deployed environment under test",
    ),
    "HELLOBOOKS_BASE_URL": EnvVar(
        name="HELLOBOOKS_BASE_URL",
        default=None,  # Computed from HELLOBOOKS_ENV
        pattern=r"^https?://[^\s/]+",
        description="Explicit base URL, overrides HELLOBOOKS_ENV",
    ),
    # Credentials
    "HELLOBOOKS_SEED_EMAIL": EnvVar(
        name="HELLOBOOKS_SEED_EMAIL",
        default="test@hellobooks.com",
        description="Account used by the seed login before each scenario",
    ),
    "HELLOBOOKS_SEED_PASSWORD": EnvVar(
        name="HELLOBOOKS_SEED_PASSWORD",
        default="Password@123",
        sensitive=True,
        description="Password for the seed login account",
    ),
    "E2E_EMAIL": EnvVar(
        name="E2E_EMAIL",
        default="test.user@example.com",
        description="Registered email used by login scenarios",
    ),
    "E2E_PASSWORD": EnvVar(
        name="E2E_PASSWORD",
        default="Password123!",
        sensitive=True,
        description="Password for E2E_EMAIL",
    ),
    # Browser settings
    "E2E_HEADLESS": EnvVar(
        name="E2E_HEADLESS", default=True, var_type="bool", description="Run browser headless"
    ),
    "E2E_SLOW_MO": EnvVar(
        name="E2E_SLOW_MO",
        default=0,
        var_type="int",
        min_value=0,
        max_value=10000,
        description="Delay between browser operations (ms)",
    ),
    "E2E_RECORD_VIDEO": EnvVar(
        name="E2E_RECORD_VIDEO",
        default=True,
        var_type="bool",
        description="Record video and retain it for failed scenarios",
    ),
    "E2E_SCREENSHOT_ON_FAILURE": EnvVar(
        name="E2E_SCREENSHOT_ON_FAILURE",
        default=True,
        var_type="bool",
        description="Capture a screenshot when a scenario fails",
    ),
    "E2E_ARTIFACTS_DIR": EnvVar(
        name="E2E_ARTIFACTS_DIR",
        default=BASE_DIR / "artifacts",
        var_type="path",
        description="Directory for screenshots and videos",
    ),
    # Run control
    "E2E_RUN": EnvVar(
        name="E2E_RUN",
        default=False,
        var_type="bool",
        description="Enable live browser scenarios (same as --run-e2e)",
    ),
}


class ConfigMeta(type):
    """Metaclass to provide attribute access to config values."""

    _cache: Dict[str, Any] = {}

    def __getattr__(cls, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)

        if name in cls._cache:
            return cls._cache[name]

        if name == "BASE_URL":
            value = resolve_base_url()
            cls._cache[name] = value
            return value

        if name in ENV_VARS:
            value = ENV_VARS[name].get_value()
            cls._cache[name] = value
            return value

        raise AttributeError(f"Unknown config variable: {name}")


class Config(metaclass=ConfigMeta):
    """
    Configuration class with environment variable access.

    Access config values as class attributes:
        Config.BASE_URL  # Resolved base URL, no trailing slash
        Config.E2E_EMAIL  # Returns str
        Config.E2E_HEADLESS  # Returns bool
    """

    @classmethod
    def to_dict(cls, include_sensitive: bool = False) -> Dict[str, Any]:
        """Get all config values as dictionary."""
        result = {}
        for name, env_var in ENV_VARS.items():
            try:
                value = env_var.get_value()
                if env_var.sensitive and not include_sensitive:
                    value = "***" if value else None
                result[name] = value
            except ConfigError:
                result[name] = None
        try:
            result["BASE_URL"] = resolve_base_url()
        except ConfigError:
            result["BASE_URL"] = None
        return result

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the config cache (useful for testing)."""
        cls._cache.clear()


def resolve_base_url() -> str:
    """Base URL from HELLOBOOKS_BASE_URL, else from HELLOBOOKS_ENV."""
    explicit = ENV_VARS["HELLOBOOKS_BASE_URL"].get_value()
    if explicit:
        return explicit.rstrip("/")
    return ENVIRONMENT_URLS[ENV_VARS["HELLOBOOKS_ENV"].get_value()]


def validate_config(strict: bool = False) -> Dict[str, Any]:
    """
    Validate all environment variables at session start.

    Args:
        strict: If True, raise on any validation error.
                If False, log warnings for optional vars.

    Returns:
        Dict of validated config values

    Raises:
        ConfigError: If required variables are missing or invalid
    """
    errors = []
    warnings = []
    validated = {}

    for name, env_var in ENV_VARS.items():
        try:
            value = env_var.get_value()
            validated[name] = value

            if env_var.sensitive:
                log_value = "***" if value else "not set"
            else:
                log_value = value
            logger.debug(f"Config: {name} = {log_value}")

        except ConfigError as e:
            if env_var.required or strict:
                errors.append(str(e))
            else:
                warnings.append(str(e))

    # Computed defaults
    if validated.get("HELLOBOOKS_BASE_URL") is None:
        env_name = validated.get("HELLOBOOKS_ENV") or "dev"
        validated["BASE_URL"] = ENVIRONMENT_URLS[env_name]
    else:
        validated["BASE_URL"] = validated["HELLOBOOKS_BASE_URL"].rstrip("/")

    for warning in warnings:
        logger.warning(f"Config warning: {warning}")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        logger.error(error_msg)
        raise ConfigError(error_msg)

    logger.info(f"Configuration validated: {len(validated)} variables loaded")
    return validated
