"""Derive a key-only `.env.example` from a populated `.env`."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from util_dotenv.services.classifier import SEPARATOR, classify_line
from util_dotenv.services.storage import EnvFileStorage

logger = logging.getLogger(__name__)


def generate(lines: Iterable[str]) -> list[str]:
    """Strip the value from every assignment line, keeping everything else as-is."""
    output: list[str] = []
    for line in lines:
        classified = classify_line(line)
        if classified.is_assignment:
            output.append(f"{classified.raw_key}{SEPARATOR}")
        else:
            output.append(line)
    return output


def generate_template_file(
    input_path: Path | str,
    output_path: Path | str,
    storage: EnvFileStorage | None = None,
) -> list[str]:
    storage = storage or EnvFileStorage()
    source = storage.read_lines(input_path)
    template = generate(source)
    logger.debug("Generated %s template lines from %s", len(template), input_path)
    storage.write_lines(output_path, template)
    return template
