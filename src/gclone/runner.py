import logging
import shutil
import subprocess
from pathlib import Path
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)


class Runner(Protocol):
    def run(self, cmd: Sequence[str], cwd: Path | None = None) -> int: ...


class SubprocessRunner:
    """Run a command with the terminal's stdio and return its exit status.

    OSError from a failed spawn propagates to the caller.
    """

    def run(self, cmd: Sequence[str], cwd: Path | None = None) -> int:
        program, *args = cmd
        # resolves PATHEXT wrappers such as code.cmd on Windows
        executable = shutil.which(program) or program

        logger.debug(f"Running: {' '.join(cmd)} (cwd={cwd})")
        return subprocess.run([executable, *args], cwd=cwd).returncode
