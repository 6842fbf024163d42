"""
Global configuration manager for URL Extractor CLI
Handles the service address and history preferences
"""

import json
import logging
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, asdict, fields

from ..core.config import ExtractorConfig

logger = logging.getLogger(__name__)


@dataclass
class CLIConfig:
    """CLI configuration stored globally in ~/.urlextractor/"""

    base_url: Optional[str] = None
    auto_save: Optional[bool] = None
    request_timeout: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for JSON serialization"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CLIConfig':
        """Create config from dictionary, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


class ConfigManager:
    """Manages global URL Extractor CLI configuration"""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize config manager with global config directory"""
        self.config_dir = Path(config_dir) if config_dir else Path.home() / ".urlextractor"
        self.config_file = self.config_dir / "config.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self.config = self.load_config()

    def load_config(self) -> CLIConfig:
        """Load configuration from file or create default"""
        if not self.config_file.exists():
            return CLIConfig()

        try:
            with open(self.config_file, 'r') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("config file must hold a JSON object")
            return CLIConfig.from_dict(data)
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Failed to load config: {e}")
            return CLIConfig()

    def save_config(self):
        """Save current configuration to file"""
        try:
            with open(self.config_file, 'w') as f:
                json.dump(self.config.to_dict(), f, indent=2)
        except OSError as e:
            logger.error(f"Error saving config: {e}")

    def set_base_url(self, base_url: str):
        """Set and save the extraction service address"""
        self.config.base_url = base_url
        self.save_config()

    def set_auto_save(self, auto_save: bool):
        self.config.auto_save = auto_save
        self.save_config()

    def build_extractor_config(self) -> ExtractorConfig:
        """
        Combine file settings with the environment.
        Environment variables win over the config file.
        """
        overrides: Dict[str, Any] = {
            key: value for key, value in self.config.to_dict().items() if value is not None
        }
        return ExtractorConfig.from_env(**overrides)


_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager instance"""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
