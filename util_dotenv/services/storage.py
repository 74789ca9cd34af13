from __future__ import annotations

import logging
import os
import re
from contextlib import suppress
from pathlib import Path
from typing import Iterable

from util_dotenv.config import get_settings
from util_dotenv.utils.errors import EnvFileIOError, EnvFileNotFoundError

logger = logging.getLogger(__name__)

LINE_BREAK = re.compile(r"\r?\n")


class EnvFileStorage:
    """Reads and writes env files as ordered lists of lines."""

    def __init__(self, encoding: str | None = None):
        self.encoding = encoding or get_settings().encoding

    def read_lines(self, path: Path | str) -> list[str]:
        path = Path(path)
        if not path.exists():
            raise EnvFileNotFoundError(path)
        try:
            # newline="" keeps "\r\n" intact so both endings split the same way.
            with path.open("r", encoding=self.encoding, newline="") as handle:
                content = handle.read()
        except (OSError, LookupError, UnicodeDecodeError) as exc:
            raise EnvFileIOError(path, str(exc)) from exc
        lines = LINE_BREAK.split(content)
        logger.debug("Read %s lines from %s", len(lines), path)
        return lines

    def write_lines(self, path: Path | str, lines: Iterable[str]) -> None:
        """Replace ``path`` with ``lines``; the old file survives any failure."""
        path = Path(path)
        try:
            data = "\n".join(lines).encode(self.encoding)
        except (LookupError, UnicodeEncodeError) as exc:
            raise EnvFileIOError(path, str(exc)) from exc

        tmp_path = path.with_name(f".{path.name}.tmp")
        try:
            tmp_path.write_bytes(data)
            os.replace(tmp_path, path)
        except OSError as exc:
            with suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise EnvFileIOError(path, str(exc)) from exc
        logger.debug("Wrote %s bytes to %s", len(data), path)
