# termnav/config.py
import json
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path(__file__).parent.parent / "config" / "termnav.json"


@dataclass
class Settings:
    animation_delay: float = 2.0  # Seconds to wait on animated push/pop
    separator: str = "-" * 15  # Line printed under a stack title
    log_level: str = "WARNING"  # Used by the CLI when --verbose is not given
    config_file: str = ""

    def __post_init__(self):
        self.config_file = os.getenv("TERMNAV_CONFIG", str(DEFAULT_CONFIG_FILE))

        config = self._load_config_file(Path(self.config_file))

        navigation_config = self._section(config, "navigation")
        if "animation_delay" in navigation_config:
            self.animation_delay = self._parse_delay(
                navigation_config["animation_delay"], "navigation.animation_delay", self.animation_delay
            )
        self.separator = str(navigation_config.get("separator", self.separator))

        logging_config = self._section(config, "logging")
        self.log_level = str(logging_config.get("level", self.log_level))

        # Environment wins over the config file
        env_delay = os.getenv("TERMNAV_ANIMATION_DELAY")
        if env_delay:
            self.animation_delay = self._parse_delay(env_delay, "TERMNAV_ANIMATION_DELAY", self.animation_delay)
        self.log_level = os.getenv("TERMNAV_LOG_LEVEL", self.log_level).upper()

    @staticmethod
    def _section(config: dict, name: str) -> dict:
        """Return a config section, or {} when it is missing or not an object."""
        section = config.get(name, {})
        if not isinstance(section, dict):
            logger.warning("Ignoring config section %r: expected an object, got %r", name, section)
            return {}
        return section

    @staticmethod
    def _parse_delay(value, source: str, fallback: float) -> float:
        """Delay in seconds; non-numeric, negative or non-finite values keep `fallback`."""
        try:
            delay = float(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid %s: %r", source, value)
            return fallback
        if not math.isfinite(delay) or delay < 0:
            logger.warning("Ignoring invalid %s: %r (must be a finite number >= 0)", source, value)
            return fallback
        return delay

    @staticmethod
    def _load_config_file(path: Path) -> dict:
        """Load the JSON config file. Missing or unreadable files yield {}."""
        if not path.exists():
            return {}
        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not load config file %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Config file %s must contain a JSON object", path)
            return {}
        return data


settings = Settings()
