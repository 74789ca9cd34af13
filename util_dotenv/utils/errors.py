from __future__ import annotations

from pathlib import Path


class EnvFileError(Exception):
    """Base class for failures while handling env files."""


class EnvFileNotFoundError(EnvFileError):
    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"Input file `{path}` not found")


class EnvFileIOError(EnvFileError):
    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(reason)


class PromptCancelledError(EnvFileError):
    """Raised when the user aborts an interactive prompt."""
