"""github clone

tmp_directory
editor
"""

import logging
from pathlib import Path

from .config import UserConfig
from .errors import CloneError, DirectoryError, EditorError
from .parser import Repo
from .runner import Runner

logger = logging.getLogger(__name__)

EDITOR = "code"


def clone(
    repo: Repo,
    config: UserConfig,
    *,
    use_tmp: bool,
    open_editor: bool,
    runner: Runner,
    cwd: Path = Path("."),
) -> Path:
    """Clone `repo` and return the directory git created for it."""

    parent_dir = cwd
    if use_tmp:
        parent_dir = Path(config.tmp_directory)
        try:
            parent_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryError(f"error creating tmp directory: {e}") from e

    # git names the directory after the last url segment, which is repo.name
    local_dst = parent_dir / repo.name
    logger.debug(f"{parent_dir=} {local_dst=}")

    cmd = ["git", "clone", repo.url]
    logger.info(f"Cloning {repo.url}...")
    try:
        status = runner.run(cmd, cwd=parent_dir)
    except OSError as e:
        raise CloneError(f"error cloning repository: {e}") from e
    if status != 0:
        raise CloneError(
            f"error cloning repository: git exited with status {status}"
        )

    if open_editor:
        _open_editor(local_dst, runner)

    logger.info("Clone completed successfully!")
    return local_dst


def _open_editor(local_dst: Path, runner: Runner) -> None:
    cmd = [EDITOR, str(local_dst)]
    try:
        status = runner.run(cmd)
    except OSError as e:
        raise EditorError(f"error opening VSCode: {e}") from e
    if status != 0:
        raise EditorError(
            f"error opening VSCode: {EDITOR} exited with status {status}"
        )

    logger.info("Opened in VSCode")
