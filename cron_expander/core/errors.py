from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParseError(Exception):
    """Error envelope for malformed cron input.

    `code` is stable and machine-readable; `message` is what the CLI prints.
    """

    code: str
    message: str
    field: Optional[str] = None
    expression: Optional[str] = None

    def __str__(self) -> str:
        return self.message
