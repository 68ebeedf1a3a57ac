"""gclone configuration

default_username
tmp_directory
"""

import logging
from pathlib import Path
from typing import Callable

from . import survey
from .config import UserConfig, load_config, save_config

logger = logging.getLogger(__name__)


def setup_config(
    cfg_path: Path,
    ask: Callable[[str], str] | None = None,
) -> UserConfig:
    if ask is None:
        ask = survey.ask

    config = load_config(cfg_path)

    # blank answers keep what is already configured
    username = ask("Enter your default GitHub username: ").strip()
    if username:
        config.default_username = username

    tmp_dir = ask(
        "Enter your temporary directory path "
        f"(press Enter for default '{config.tmp_directory}'): "
    ).strip()
    if tmp_dir:
        config.tmp_directory = tmp_dir

    save_config(config, cfg_path)

    if not config.default_username:
        logger.warning(
            "no default username set, gclone stays unconfigured "
            "until you run 'gclone -config' again"
        )

    logger.info("Configuration saved successfully!")
    return config
