"""Configuration Management with Pydantic.

Settings come from, in increasing order of precedence: model defaults, a
YAML file, ``TSRT_*`` environment variables, and command-line flags (the
last applied by tsrt.cli).
"""

import os
from pathlib import Path
from typing import Literal

import structlog
import yaml
from pydantic import BaseModel, Field, field_validator

logger = structlog.get_logger(__name__)

DEFAULT_CONFIG_FILES = ("tsrt.yaml", "tsrt.yml")

ENV_OVERRIDES = {
    "algorithm": "TSRT_ALGORITHM",
    "separator": "TSRT_SEPARATOR",
    "logging_level": "TSRT_LOGGING_LEVEL",
    "json_logs": "TSRT_JSON_LOGS",
}


class TsrtConfig(BaseModel):
    """Settings for sorting and rendering.

    Attributes:
        algorithm: Sorting algorithm ('kahn' or 'dfs')
        separator: Text placed between vertex labels in the rendered order
        logging_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render log records as JSON instead of console text
    """

    algorithm: Literal["kahn", "dfs"] = Field(
        default="kahn",
        description="Topological sorting algorithm",
    )
    separator: str = Field(
        default=" -> ",
        min_length=1,
        description="Separator between rendered vertex labels",
    )
    logging_level: str = Field(
        default="WARNING",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log records",
    )

    @field_validator("algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v: object) -> object:
        """Accept algorithm names in any case."""
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("logging_level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept level names in any case."""
        return v.strip().upper() if isinstance(v, str) else v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "TsrtConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Parsed and validated TsrtConfig instance

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If the file is empty, not a mapping, or not valid YAML
        """
        config_path = Path(path)

        if not config_path.exists():
            msg = f"Configuration file not found: {config_path}"
            raise FileNotFoundError(msg)

        logger.info("loading_configuration", path=str(config_path))

        try:
            with config_path.open() as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.exception("yaml_parse_error", error=str(e), path=str(config_path))
            msg = f"Invalid YAML in configuration file: {e}"
            raise ValueError(msg) from e

        if not config_data:
            msg = "Configuration file is empty"
            raise ValueError(msg)
        if not isinstance(config_data, dict):
            msg = "Configuration file must contain a mapping"
            raise ValueError(msg)

        config = cls(**cls._apply_env_overrides(config_data))
        logger.info(
            "configuration_loaded",
            algorithm=config.algorithm,
            logging_level=config.logging_level,
        )
        return config

    @classmethod
    def from_env(cls) -> "TsrtConfig":
        """Build configuration from defaults and environment overrides only."""
        return cls(**cls._apply_env_overrides({}))

    @classmethod
    def _apply_env_overrides(cls, config_data: dict) -> dict:
        """Apply ``TSRT_*`` environment variable overrides.

        Args:
            config_data: Base configuration dictionary

        Returns:
            A new dictionary with environment overrides applied
        """
        merged = dict(config_data)
        for key, env_var in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            if key == "json_logs":
                merged[key] = value.lower() in ("true", "1", "yes")
            else:
                merged[key] = value
            logger.debug("env_override_applied", env_var=env_var, config_key=key)
        return merged


def load_config(config_path: str | Path | None = None) -> TsrtConfig:
    """Load configuration.

    Args:
        config_path: Path to a YAML file. If None, looks for tsrt.yaml or
            tsrt.yml in the current directory and falls back to defaults.

    Returns:
        Loaded TsrtConfig instance

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
    """
    if config_path is not None:
        return TsrtConfig.from_yaml(config_path)

    for default_name in DEFAULT_CONFIG_FILES:
        default_path = Path(default_name)
        if default_path.exists():
            return TsrtConfig.from_yaml(default_path)

    return TsrtConfig.from_env()


__all__ = [
    "TsrtConfig",
    "load_config",
]
