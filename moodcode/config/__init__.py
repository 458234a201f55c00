"""Configuration Management Package"""

import json
import os
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

# Valid configuration values
VALID_PROVIDERS = {"groq", "claude", "ollama"}

# Environment overrides (take precedence over the config file)
ENV_PROVIDER = "MOODCODE_PROVIDER"
ENV_MODEL = "MOODCODE_MODEL"
ENV_LOG_DIR = "MOODCODE_LOG_DIR"


@dataclass
class Config:
    """User configuration with sensible defaults."""
    provider: str = "groq"
    model: Optional[str] = None
    max_subject_length: int = 72
    max_diff_chars: int = 2000  # Diff is cut here before it goes into the prompt
    temperature: float = 0.3
    max_tokens: int = 100
    log_dir: Optional[str] = None

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if self.provider not in VALID_PROVIDERS:
            warnings.append(f"Invalid provider '{self.provider}', using '{defaults.provider}'")
            self.provider = defaults.provider

        for name in ("max_subject_length", "max_diff_chars", "max_tokens"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                warnings.append(f"Invalid {name} '{value}', using {getattr(defaults, name)}")
                setattr(self, name, getattr(defaults, name))

        if not isinstance(self.temperature, (int, float)) or not 0 <= self.temperature <= 2:
            warnings.append(f"Invalid temperature '{self.temperature}', using {defaults.temperature}")
            self.temperature = defaults.temperature

        return warnings

    def apply_env(self) -> 'Config':
        """Overlay MOODCODE_* environment variables onto this config."""
        provider = os.environ.get(ENV_PROVIDER)
        if provider:
            self.provider = provider
        self.model = os.environ.get(ENV_MODEL) or self.model
        self.log_dir = os.environ.get(ENV_LOG_DIR) or self.log_dir
        return self

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Loads configuration from .moodcoderc (local first, then home)."""

    CONFIG_FILENAME = ".moodcoderc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                self._config = self._load_from_file(path)
                self._config_path = path
                return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("top-level value must be an object")
            return Config.from_dict(data)
        except (json.JSONDecodeError, ValueError, OSError) as e:
            print(f"Config warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "get_config_path",
    "VALID_PROVIDERS",
    "ENV_PROVIDER",
    "ENV_MODEL",
    "ENV_LOG_DIR",
]
