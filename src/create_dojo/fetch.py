"""Fetching remote templates into project directories."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from create_dojo.errors import FetchError

logger = logging.getLogger(__name__)

# Shell convention for "command not found".
_NOT_FOUND = 127


class Fetcher(Protocol):
    """Materializes a remote repository reference at a destination path."""

    def fetch(self, ref: str, dest: Path) -> int:
        """Fetch *ref* into *dest* and return the exit status."""
        ...


class DegitFetcher:
    """Runs ``npx degit <ref> <dest>`` with the terminal attached."""

    def __init__(self, command: tuple[str, ...] = ("npx", "degit")) -> None:
        self.command = command

    def fetch(self, ref: str, dest: Path) -> int:
        executable = shutil.which(self.command[0])
        if executable is None:
            logger.error("%s not found on PATH", self.command[0])
            return _NOT_FOUND

        argv = [executable, *self.command[1:], ref, str(dest)]
        logger.debug("Running %s", " ".join(argv))
        result = subprocess.run(argv, check=False)
        return result.returncode


def fetch_template(fetcher: Fetcher, ref: str, dest: Path) -> None:
    """Fetch *ref* into *dest*, raising ``FetchError`` on a non-zero exit status."""
    status = fetcher.fetch(ref, dest)
    if status != 0:
        raise FetchError(ref, status)
    logger.debug("Fetched %s into %s", ref, dest)
