"""
URL Extractor Configuration
"""

import os
from dataclasses import dataclass
from typing import Optional, Dict, Any
from pathlib import Path

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_STORAGE_KEY = "aicontent"


@dataclass
class ExtractorConfig:
    """URL Extractor configuration with sensible defaults"""

    # Extraction service
    base_url: str = DEFAULT_BASE_URL
    extract_path: str = "/api/extract"
    request_timeout: Optional[float] = None  # None waits until the request settles

    # Storage
    local_storage_path: str = "./.urlextractor"
    storage_key: str = DEFAULT_STORAGE_KEY
    auto_save: bool = True  # Write history back after every new record

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration"""
        self.base_url = (self.base_url or "").strip().rstrip("/")
        if not self.base_url:
            self.base_url = DEFAULT_BASE_URL

        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"Base URL must start with http:// or https://: {self.base_url}")

        if not self.extract_path.startswith("/"):
            self.extract_path = "/" + self.extract_path

        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ValueError("Request timeout must be positive")

        if not self.storage_key:
            raise ValueError("Storage key cannot be empty")

        self.log_level = self.log_level.upper()

    @property
    def extract_url(self) -> str:
        """Full URL of the extraction endpoint"""
        return f"{self.base_url}{self.extract_path}"

    @property
    def storage_file(self) -> Path:
        """JSON file backing the local key-value storage"""
        return Path(self.local_storage_path) / "storage.json"

    @property
    def log_file(self) -> Path:
        return Path(self.local_storage_path) / "urlextractor.log"

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ExtractorConfig':
        """Create config from dictionary"""
        return cls(**config_dict)

    @classmethod
    def from_env(cls, **overrides: Any) -> 'ExtractorConfig':
        """Create config from environment variables; explicit overrides lose to the environment"""
        config_dict: Dict[str, Any] = dict(overrides)

        # Map environment variables to config fields
        env_mapping = {
            'URL_EXTRACTOR_BASE_URL': 'base_url',
            'URL_EXTRACTOR_STORAGE_PATH': 'local_storage_path',
            'URL_EXTRACTOR_TIMEOUT': 'request_timeout',
            'URL_EXTRACTOR_AUTO_SAVE': 'auto_save',
            'URL_EXTRACTOR_LOG_LEVEL': 'log_level',
        }

        for env_var, config_field in env_mapping.items():
            value = os.getenv(env_var)
            if value is not None and value != "":
                # Convert string values to appropriate types
                if config_field == 'request_timeout':
                    config_dict[config_field] = float(value)
                elif config_field == 'auto_save':
                    config_dict[config_field] = value.lower() in ('true', '1', 'yes')
                else:
                    config_dict[config_field] = value

        return cls(**config_dict)
