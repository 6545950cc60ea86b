# twml/config/factory.py

import os
import re
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from twml.core.errors import ConfigurationError
from twml.utils.logger import get_logger, set_level

logger = get_logger(__name__)

ENV_PREFIX = "TWML_"
IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

_config: Optional["TwmlConfig"] = None


class TwmlConfig(BaseModel):
    attribute_prefix: str = "data-tw-"
    style_element_id: str = "tw-generated-styles"
    layer_name: str = "utilities"
    dark_class: str = "dark"
    debounce_seconds: float = 0.05
    strip_attributes: bool = True
    log_level: str = "INFO"
    debug: bool = False

    model_config = {
        "extra": "ignore",
        "frozen": True,
    }

    @field_validator("attribute_prefix")
    @classmethod
    def prefix_ends_with_dash(cls, value: str) -> str:
        value = value.strip()
        if not value or not value.endswith("-"):
            raise ValueError("attribute_prefix must be non-empty and end with '-'")
        return value

    @field_validator("style_element_id", "layer_name", "dark_class")
    @classmethod
    def identifier(cls, value: str) -> str:
        value = value.strip()
        if not IDENTIFIER.match(value):
            raise ValueError(f"{value!r} is not a valid identifier")
        return value

    @field_validator("debounce_seconds")
    @classmethod
    def non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("debounce_seconds must be >= 0")
        return value

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


def _read_environment() -> Dict[str, str]:
    values = {}
    for field_name in TwmlConfig.model_fields:
        raw = os.getenv(ENV_PREFIX + field_name.upper())
        if raw is not None and raw.strip():
            values[field_name] = raw.strip()
    return values


def load_config(**overrides) -> TwmlConfig:
    """Build a configuration from the environment plus explicit overrides.

    Raises:
        ConfigurationError: If any value fails validation
    """
    load_dotenv()
    values = _read_environment()
    values.update(overrides)
    try:
        return TwmlConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid twml configuration: {e.error_count()} error(s)",
            context={"errors": e.errors(include_url=False), "values": values},
        ) from e


def get_config(force_refresh: bool = False) -> TwmlConfig:
    """Return the cached configuration, rebuilding it when asked to."""
    global _config
    if _config is None or force_refresh:
        _config = load_config()
        set_level(_config.effective_log_level)
        logger.debug(f"Loaded configuration: {_config!r}")
    return _config
