"""Build a populated `.env` from a template by asking for each value."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from util_dotenv.models.line_model import FillResult
from util_dotenv.services.classifier import SEPARATOR, classify_line
from util_dotenv.services.storage import EnvFileStorage

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str | None]


def _has_value(answer: str | None) -> bool:
    return isinstance(answer, str) and answer.strip() != ""


def fill(lines: Iterable[str], prompt: Prompt) -> FillResult:
    """Prompt for every assignment line of a template, one key at a time.

    Non-assignment lines are copied through untouched. The result is only
    marked as committed when at least one answer is non-blank; callers must
    not persist an uncommitted result. A ``PromptCancelledError`` raised by
    ``prompt`` propagates and no result is produced.
    """
    output: list[str] = []
    answers: list[str | None] = []

    for line in lines:
        classified = classify_line(line)
        if not classified.is_assignment:
            output.append(line)
            continue

        key = classified.key
        logger.debug("Prompting for %s", key)
        answer = prompt(key)
        answers.append(answer)
        output.append(f"{key}{SEPARATOR}{answer if answer is not None else ''}")

    committed = any(_has_value(answer) for answer in answers)
    logger.debug("Collected %s answers, committed=%s", len(answers), committed)
    return FillResult(lines=output, answers=answers, committed=committed)


def fill_env_file(
    input_path: Path | str,
    output_path: Path | str,
    prompt: Prompt,
    storage: EnvFileStorage | None = None,
) -> FillResult:
    storage = storage or EnvFileStorage()
    template = storage.read_lines(input_path)
    logger.info("\nConfiguring your environment. Press `Ctrl-c` to skip")
    result = fill(template, prompt)
    if result.committed:
        storage.write_lines(output_path, result.lines)
    return result
