from __future__ import annotations

from typing import Iterable

from util_dotenv.models.line_model import ClassifiedLine, LineKind

SEPARATOR = "="
COMMENT_PREFIX = "#"


def classify_line(line: str) -> ClassifiedLine:
    """Work out whether ``line`` is blank, a comment, an assignment or neither.

    Only the first ``=`` separates the key from the value, so ``A=b=c`` has
    the key ``A`` and the value ``b=c``.
    """
    stripped = line.strip()
    if not stripped:
        return ClassifiedLine(text=line, kind=LineKind.BLANK)
    if stripped.startswith(COMMENT_PREFIX):
        return ClassifiedLine(text=line, kind=LineKind.COMMENT)

    index = line.find(SEPARATOR)
    if index == -1:
        return ClassifiedLine(text=line, kind=LineKind.MALFORMED)
    return ClassifiedLine(text=line, kind=LineKind.ASSIGNMENT, separator_index=index)


def classify_lines(lines: Iterable[str]) -> list[ClassifiedLine]:
    return [classify_line(line) for line in lines]
