import logging
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

import orjson
from mashumaro.exceptions import InvalidFieldValue, MissingField
from mashumaro.mixins.orjson import DataClassORJSONMixin

from .errors import ConfigError, HomeDirectoryError

logger = logging.getLogger(__name__)


def default_tmp_directory() -> str:
    return str(Path(tempfile.gettempdir()) / "gclone")


@dataclass
class UserConfig(DataClassORJSONMixin):
    default_username: str = field(default="")
    tmp_directory: str = field(default_factory=default_tmp_directory)


CONFIG_DIR_NAME = ".gclone"
CONFIG_FILE_NAME = "config.json"
CONFIG_KEYS = ("default_username", "tmp_directory")


def resolve_config_path(home: Path | None = None) -> Path:
    """<home>/.gclone/config.json

    `home` defaults to the current user's home directory.
    """

    if home is None:
        try:
            home = Path.home()
        except RuntimeError as e:
            raise HomeDirectoryError(f"error getting home directory: {e}") from e

    return Path(home) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config(cfg_path: Path) -> UserConfig:
    if not cfg_path.exists():
        logger.debug(f"not found {cfg_path}, use default config")
        return UserConfig()

    try:
        content = cfg_path.read_bytes()
    except OSError as e:
        raise ConfigError(f"error reading config file {cfg_path}: {e}") from e

    # decode first so a non-object document is reported as a parse error
    try:
        data = orjson.loads(content)
    except orjson.JSONDecodeError as e:
        raise ConfigError(f"error parsing config file {cfg_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"error parsing config file {cfg_path}: expected a JSON object"
        )

    # mashumaro stringifies str fields, so check types first; null keeps the default
    for key in CONFIG_KEYS:
        value = data.get(key)
        if value is None:
            data.pop(key, None)
        elif not isinstance(value, str):
            raise ConfigError(
                f"error parsing config file {cfg_path}: "
                f"{key} must be a string, got {value!r}"
            )

    try:
        config = UserConfig.from_dict(data)
    except (InvalidFieldValue, MissingField, ValueError) as e:
        raise ConfigError(f"error parsing config file {cfg_path}: {e}") from e

    logger.debug(f"use config from {cfg_path}")
    logger.debug(f"{config=}")
    return config


def save_config(config: UserConfig, cfg_path: Path) -> None:
    try:
        cfg_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"error creating config directory: {e}") from e

    content = config.to_jsonb(orjson_options=orjson.OPT_INDENT_2)

    try:
        cfg_path.write_bytes(content)
    except OSError as e:
        raise ConfigError(f"error writing config file: {e}") from e

    logger.debug(f"saved config to {cfg_path}")
