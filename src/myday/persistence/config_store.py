"""
Persistence of the application configuration.
"""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ..errors import StorageError
from ..models.app_config import AppConfig
from .file_store import atomic_write_text

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"


class ConfigStore:
    """Loads and saves ``config.json`` in the data directory."""

    def __init__(self, data_dir: Union[str, Path]):
        self.config_path = Path(data_dir) / CONFIG_FILENAME

    def load_config(self) -> AppConfig:
        """Load the configuration, or defaults when no file exists."""
        try:
            raw = self.config_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return AppConfig()
        except OSError as e:
            raise StorageError("read config file", self.config_path, str(e)) from e

        try:
            return AppConfig.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            raise StorageError("parse config file", self.config_path, str(e)) from e

    def save_config(self, config: AppConfig) -> None:
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError("create data directory", self.config_path.parent, str(e)) from e
        data = config.model_dump(mode="json", by_alias=True)
        atomic_write_text(self.config_path, json.dumps(data, indent=2))
        logger.debug("Saved configuration to %s", self.config_path)
