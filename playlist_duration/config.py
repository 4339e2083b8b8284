import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

import yaml
from pymonad.either import Either, Left, Right

from .aggregator import DEFAULT_SPEEDS
from .domain.errors import ConfigError

logger = logging.getLogger(__name__)

API_KEY_ENV = "YOUTUBE_API_KEY"


@dataclass(frozen=True)
class Settings:
    """Runtime settings of the calculator."""
    api_key: str
    lang: str = "en"
    speeds: Tuple[float, ...] = DEFAULT_SPEEDS
    show_days: bool = False


def _read_config_file(config_file: Union[str, Path]) -> Either[ConfigError, dict]:
    try:
        with open(config_file, "r", encoding="utf-8") as file:
            data = yaml.safe_load(file)
    except (yaml.YAMLError, IOError) as e:
        logger.error(f"Could not read config file '{config_file}': {e}")
        return Left(ConfigError(f"Could not read config file '{config_file}': {e}"))

    if data is None:
        return Right({})
    if not isinstance(data, dict):
        logger.error(f"Config file '{config_file}' is not a mapping.")
        return Left(ConfigError(f"Config file '{config_file}' must contain a mapping."))

    logger.info(f"Config file '{config_file}' loaded.")
    return Right(data)


def _parse_speeds(raw) -> Optional[Tuple[float, ...]]:
    try:
        speeds = tuple(float(speed) for speed in raw)
    except (TypeError, ValueError):
        return None
    if not speeds or any(speed <= 0 for speed in speeds):
        return None
    return speeds


def _build_settings(data: dict, api_key: Optional[str]) -> Either[ConfigError, Settings]:
    key = api_key or os.environ.get(API_KEY_ENV) or data.get("api_key")
    if not key:
        logger.error("No YouTube API key configured.")
        return Left(
            ConfigError(
                f"No YouTube API key found. Use --api-key, set {API_KEY_ENV} "
                "or add 'api_key' to the config file."
            )
        )

    speeds = _parse_speeds(data.get("speeds", DEFAULT_SPEEDS))
    if speeds is None:
        logger.error(f"Invalid speeds in config: {data.get('speeds')!r}")
        return Left(ConfigError("'speeds' must be a list of positive numbers."))

    return Right(
        Settings(
            api_key=str(key),
            lang=str(data.get("lang", "en")),
            speeds=speeds,
            show_days=bool(data.get("show_days", False)),
        )
    )


def load_settings(
    config_file: Optional[Union[str, Path]] = None, api_key: Optional[str] = None
) -> Either[ConfigError, Settings]:
    """
    Loads settings from explicit arguments, the environment and a YAML file.

    Args:
        config_file: Optional path to a YAML file (keys: api_key, lang, speeds, show_days).
        api_key: Explicit API key, overrides every other source.

    Returns:
        Either: A Right(Settings), or a Left(ConfigError).
    """
    source = _read_config_file(config_file) if config_file else Right({})
    return source.bind(lambda data: _build_settings(data, api_key))
