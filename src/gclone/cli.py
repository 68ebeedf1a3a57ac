"""Clone a GitHub repository by its short name.

  gclone myrepo          clones https://github.com/<default_username>/myrepo
  gclone owner/myrepo    clones https://github.com/owner/myrepo
"""

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .cmd_clone import clone
from .cmd_config import setup_config
from .config import load_config, resolve_config_path
from .errors import GcloneError, NotConfiguredError, UsageError
from .logging_config import setup_logging
from .parser import resolve_repo
from .runner import Runner, SubprocessRunner

logger = logging.getLogger(__name__)

USAGE = """\
Usage: gclone [-c] [-tmp] repository-name
       gclone -config (to configure settings)"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gclone",
        description=__doc__,
        formatter_class=argparse.RawTextHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "repository", nargs="*", help="repository name, `name` or `owner/name`"
    )
    parser.add_argument(
        "-c",
        dest="open_editor",
        action="store_true",
        help="Open the cloned repository in VSCode",
    )
    parser.add_argument(
        "-tmp",
        dest="use_tmp",
        action="store_true",
        help="Clone into temporary directory",
    )
    parser.add_argument(
        "-config",
        dest="configure",
        action="store_true",
        help="Configure gclone settings",
    )
    parser.add_argument("--debug", action="store_true", help="Set log level as DEBUG")
    return parser


def run(
    args: argparse.Namespace,
    *,
    home: Path | None,
    cwd: Path,
    runner: Runner,
) -> None:
    cfg_path = resolve_config_path(home)

    if args.configure:
        setup_config(cfg_path)
        return

    config = load_config(cfg_path)

    if not config.default_username:
        raise NotConfiguredError(
            "gclone is not configured. Please run 'gclone -config' first."
        )

    if len(args.repository) == 0:
        raise UsageError(USAGE)

    repo_name, *ignored = args.repository
    if ignored:
        logger.debug(f"ignoring extra arguments: {ignored}")

    repo = resolve_repo(repo_name, config.default_username)
    clone(
        repo,
        config,
        use_tmp=args.use_tmp,
        open_editor=args.open_editor,
        runner=runner,
        cwd=cwd,
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    home: Path | None = None,
    cwd: Path | None = None,
    runner: Runner | None = None,
) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(args.debug)
    logger.debug(f"{args=}")

    try:
        run(
            args,
            home=home,
            cwd=Path(".") if cwd is None else cwd,
            runner=SubprocessRunner() if runner is None else runner,
        )
    except GcloneError as e:
        logger.error(e)
        return 1

    return 0
