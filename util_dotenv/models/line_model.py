from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class LineKind(str, Enum):
    BLANK = "blank"
    COMMENT = "comment"
    ASSIGNMENT = "assignment"
    MALFORMED = "malformed"


class ClassifiedLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    kind: LineKind
    separator_index: int | None = None

    @property
    def is_assignment(self) -> bool:
        return self.kind is LineKind.ASSIGNMENT

    @property
    def raw_key(self) -> str | None:
        # Everything before the first `=`, leading text included.
        if self.separator_index is None:
            return None
        return self.text[: self.separator_index]

    @property
    def key(self) -> str | None:
        raw_key = self.raw_key
        return raw_key.strip() if raw_key is not None else None


class FillResult(BaseModel):
    lines: list[str]
    answers: list[str | None]
    committed: bool
