import yaml
from pathlib import Path
from typing import Dict, Any

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = "config/config.yaml"


class AppConfig:
    """
    Configuration loader class to handle YAML config file
    """
    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH):
        # Absolute paths are kept as-is by the join
        self.config_path = PROJECT_ROOT / config_path
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found at: {self.config_path}")
        with open(self.config_path, "r", encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Error parsing YAML file: {e}")
        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ValueError(f"Config root must be a mapping: {self.config_path}")
        return config

    @property
    def config(self) -> Dict[str, Any]:
        "Get full configuration dict"
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        "Helper to get a value from config with a default"
        return self._config.get(key, default)

    def section(self, name: str) -> Dict[str, Any]:
        "Sub-dict for a top-level section, empty when absent"
        value = self._config.get(name) or {}
        if not isinstance(value, dict):
            raise ValueError(f"Config section '{name}' must be a mapping")
        return value
