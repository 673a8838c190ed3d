"""Configuration Management Package"""

import json
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from commitgen.llm import GenerationParams

VALID_PROVIDERS = {"github", "claude"}

# Credential variable per provider; credentials never live in the config file
CREDENTIAL_ENV_VARS = {
    "github": "GITHUB_ACCESS_TOKEN",
    "claude": "ANTHROPIC_API_KEY",
}


@dataclass
class Config:
    """User configuration with sensible defaults."""
    provider: str = "github"
    model: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    top_p: Optional[float] = None

    def generation_params(self) -> GenerationParams:
        return GenerationParams(
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            top_p=self.top_p,
        )

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning. Sampling
        parameters are the provider's business and are not checked here.
        """
        warnings = []
        defaults = Config()

        if self.provider not in VALID_PROVIDERS:
            warnings.append(f"Invalid provider '{self.provider}', using '{defaults.provider}'")
            self.provider = defaults.provider

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


def _env_number(name: str, cast):
    """Read a numeric environment variable, or None if unset or unparseable."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return cast(raw)
    except ValueError:
        print(f"Config warning: Ignoring {name}={raw!r}, not a number", file=sys.stderr)
        return None


def apply_env_overrides(config: Config) -> Config:
    """Layer environment variables over file/default settings."""
    provider = os.environ.get("CM_PROVIDER")
    if provider:
        config.provider = provider
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)

    model = os.environ.get("CM_MODEL") or os.environ.get("OPENAI_BASE_MODEL")
    if model:
        config.model = model

    temperature = _env_number("OPENAI_TEMPERATURE", float)
    if temperature is not None:
        config.temperature = temperature

    max_tokens = _env_number("OPENAI_MAX_TOKENS", int)
    if max_tokens is not None:
        config.max_tokens = max_tokens

    top_p = _env_number("OPENAI_TOP_P", float)
    if top_p is not None:
        config.top_p = top_p

    return config


def credential_env_var(provider: str) -> str:
    return CREDENTIAL_ENV_VARS.get(provider, "")


class ConfigManager:
    """Finds and loads the JSON config file."""

    CONFIG_FILENAME = ".commitgenrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        local_path = Path.cwd() / self.CONFIG_FILENAME
        if local_path.exists():
            self._config = self._load_from_file(local_path)
            self._config_path = local_path
            return self._config

        home_path = Path.home() / self.CONFIG_FILENAME
        if home_path.exists():
            self._config = self._load_from_file(home_path)
            self._config_path = home_path
            return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r') as f:
                data = json.load(f)
            return Config.from_dict(data)
        except (json.JSONDecodeError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
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
    "apply_env_overrides",
    "credential_env_var",
    "VALID_PROVIDERS",
]
