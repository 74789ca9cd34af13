from __future__ import annotations

from typing import Callable

from util_dotenv.utils.errors import PromptCancelledError


class ConsolePrompter:
    """Asks for one value at a time on the terminal."""

    def __init__(self, input_func: Callable[[str], str] = input):
        self._input = input_func

    def message_for(self, key: str) -> str:
        return f"Enter value for `{key}`: "

    def __call__(self, key: str) -> str:
        try:
            return self._input(self.message_for(key))
        except (KeyboardInterrupt, EOFError) as exc:
            raise PromptCancelledError(key) from exc
