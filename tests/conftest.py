import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from util_dotenv.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch):
    for name in ("ENV_FILE", "EXAMPLE_FILE", "ENCODING", "LOG_LEVEL", "QUIET"):
        monkeypatch.delenv(f"UTIL_DOTENV_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class ScriptedPrompt:
    """Answers prompts from a fixed list and records the keys it was asked for."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.keys = []

    def __call__(self, key):
        self.keys.append(key)
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer


@pytest.fixture
def scripted_prompt():
    return ScriptedPrompt
