from __future__ import annotations

import logging
from typing import Any

from cron_expander.core.errors import ParseError
from cron_expander.core.expand.expand_field import expand_field
from cron_expander.core.model import FIELD_SPECS, ParsedSchedule


logger = logging.getLogger(__name__)

EXPECTED_FORMAT = "minute hour day_of_month month day_of_week command"


def parse_schedule(text: Any) -> ParsedSchedule:
    """Split a cron line into five expanded fields plus the command.

    Any field failure aborts the whole parse; the field's ParseError is
    re-raised once with a schedule-level prefix.
    """

    if not isinstance(text, str) or not text.strip():
        raise ParseError(code="E_EMPTY_EXPRESSION", message="Cron string is required")

    tokens = text.split()
    if len(tokens) < len(FIELD_SPECS) + 1:
        raise ParseError(
            code="E_TOO_FEW_TOKENS",
            message=f"Invalid cron expression. Expected format: {EXPECTED_FORMAT}",
            expression=text,
        )

    field_tokens = tokens[: len(FIELD_SPECS)]
    command = " ".join(tokens[len(FIELD_SPECS) :])

    expanded: dict[str, tuple[int, ...]] = {}
    for spec, token in zip(FIELD_SPECS, field_tokens):
        try:
            values = expand_field(token, spec.min, spec.max)
        except ParseError as e:
            raise ParseError(
                code=e.code,
                message=f"Failed to parse cron expression: {e.message}",
                field=spec.name,
                expression=token,
            ) from e
        logger.debug("expanded %s %r -> %d values", spec.name, token, len(values))
        expanded[spec.name] = tuple(values)

    return ParsedSchedule(command=command, **expanded)
