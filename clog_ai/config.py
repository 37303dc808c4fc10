"""Configuration management for clog-ai.

Handles the user-level configuration stored in ~/.config/clog-ai/config.json:
- init_config: write the default template on first run
- load_config: read, resolve and validate the configuration
"""

import json
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


class Language(Enum):
    """Supported commit log languages."""

    ZH = "zh"
    EN = "en"


class DataSource(Enum):
    """Supported completion providers."""

    OPENAI = "openai"
    AZURE = "azure"


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigNotFoundError(ConfigError):
    """Raised when the config file has not been created yet."""

    pass


class InvalidDataSourceError(ConfigError):
    """Raised when the datasource is not one of the supported values."""

    pass


class MissingCredentialsError(ConfigError):
    """Raised when a field required by the selected datasource is empty."""

    pass


_CONFIG_DIR = Path.home() / ".config" / "clog-ai"

DEFAULT_CONFIG: Dict[str, str] = {
    "language": Language.ZH.value,
    "datasource": "",
    "openai_api_key": "",
    "openai_model": "",
    "azure_api_key": "",
    "azure_deployment_id": "",
    "azure_base_url": "",
    "azure_model": "",
    "azure_api_version": "",
}

REQUIRED_FIELDS = {
    DataSource.OPENAI: ["openai_api_key"],
    DataSource.AZURE: [
        "azure_api_key",
        "azure_deployment_id",
        "azure_base_url",
        "azure_model",
        "azure_api_version",
    ],
}

# Used only when the matching field is blank in config.json
API_KEY_ENV_VARS = {
    "openai_api_key": "OPENAI_API_KEY",
    "azure_api_key": "AZURE_OPENAI_API_KEY",
}

_DISPLAY_NAMES = {
    DataSource.OPENAI: "OpenAI",
    DataSource.AZURE: "Azure",
}


class Configuration(BaseModel):
    """The flat configuration record read from config.json."""

    model_config = ConfigDict(extra="ignore")

    language: str = Language.ZH.value
    datasource: str = ""
    openai_api_key: str = ""
    openai_model: str = ""
    azure_api_key: str = ""
    azure_deployment_id: str = ""
    azure_base_url: str = ""
    azure_model: str = ""
    azure_api_version: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        """Treat JSON null as an empty string."""
        return "" if v is None else v

    @property
    def data_source(self) -> DataSource:
        """The datasource as an enum. Raises ValueError if unsupported."""
        return DataSource(self.datasource)


def get_config_dir() -> Path:
    """Get the clog-ai configuration directory.

    Returns:
        Path to ~/.config/clog-ai/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.json file.

    Returns:
        Path to ~/.config/clog-ai/config.json
    """
    return get_config_dir() / "config.json"


def is_initialized() -> bool:
    """Check whether the config file exists."""
    return get_config_file_path().exists()


def init_config() -> bool:
    """Write the default config template if no config file exists yet.

    An existing file is never modified, so user edits survive repeated runs.

    Returns:
        True if the template was written, False if a config already existed.
    """
    config_file = get_config_file_path()

    if config_file.exists():
        return False

    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(json.dumps(DEFAULT_CONFIG, indent=2))
    return True


def read_config_file(config_file: Path) -> Dict[str, Any]:
    """Read the raw JSON content of the config file.

    An empty file is read as an empty object.

    Raises:
        ConfigError: If the file is not a valid JSON object.
    """
    content = config_file.read_text()
    if not content.strip():
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to parse config file {config_file}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_file} must contain a JSON object.")
    return data


def _apply_env_fallbacks(config: Configuration) -> Configuration:
    """Fill blank API keys from the environment (and a local .env file)."""
    load_dotenv(find_dotenv(usecwd=True))

    updates = {}
    for field_name, env_var in API_KEY_ENV_VARS.items():
        if getattr(config, field_name).strip():
            continue
        value = os.getenv(env_var)
        if value:
            updates[field_name] = value

    if not updates:
        return config
    return config.model_copy(update=updates)


def validate_config(config: Configuration) -> None:
    """Check the datasource and the fields it requires.

    Raises:
        InvalidDataSourceError: If the datasource is not supported.
        MissingCredentialsError: If a required field is empty.
    """
    config_file = get_config_file_path().resolve()

    try:
        data_source = config.data_source
    except ValueError:
        raise InvalidDataSourceError(
            f"Invalid datasource. Please check the configuration file: {config_file}"
        )

    missing = [
        name for name in REQUIRED_FIELDS[data_source]
        if not getattr(config, name).strip()
    ]
    if missing:
        name = _DISPLAY_NAMES[data_source]
        raise MissingCredentialsError(
            f"Data source is {name}, but the corresponding configuration is missing "
            f"({', '.join(missing)}). Please add it in the configuration file: {config_file}"
        )


def load_config() -> Configuration:
    """Load and validate the configuration.

    Returns:
        The validated Configuration.

    Raises:
        ConfigNotFoundError: If 'clog-ai init' has not been run.
        ConfigError: If the file cannot be parsed or fails validation.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        raise ConfigNotFoundError("please run this command first: clog-ai init")

    data = read_config_file(config_file)
    try:
        config = Configuration(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_file.resolve()}: {e}")

    config = _apply_env_fallbacks(config)
    validate_config(config)
    return config
