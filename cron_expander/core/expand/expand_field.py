from __future__ import annotations

import re
from typing import Optional

from cron_expander.core.errors import ParseError


_INT_RE = re.compile(r"[0-9]+")


def _parse_int(text: str) -> Optional[int]:
    token = text.strip()
    if not _INT_RE.fullmatch(token):
        return None
    return int(token)


def expand_field(expression: str, min_value: int, max_value: int) -> list[int]:
    """Expand one cron field expression into its ascending list of values.

    Dispatch is syntactic and the first match wins:
    wildcard, step (`/`), range (`-` without `,`), list (`,`), single value.
    List elements go through the same dispatch against the same bounds.
    """

    if expression == "*":
        return _values(min_value, max_value, 1)

    if "/" in expression:
        return _expand_step(expression, min_value, max_value)

    if "-" in expression and "," not in expression:
        return _expand_range(expression, min_value, max_value)

    if "," in expression:
        return _expand_list(expression, min_value, max_value)

    value = _parse_int(expression)
    if value is None or value < min_value or value > max_value:
        raise ParseError(
            code="E_INVALID_VALUE",
            message=f"Invalid value: {expression}. Must be between {min_value} and {max_value}",
            expression=expression,
        )
    return [value]


def _expand_step(expression: str, min_value: int, max_value: int) -> list[int]:
    # Start and end are taken as written; only the standalone range rule checks bounds.
    base, _, step_text = expression.partition("/")
    step = _parse_int(step_text)
    if step is None or step <= 0:
        raise ParseError(
            code="E_INVALID_STEP",
            message=f"Invalid step value: {step_text}",
            expression=expression,
        )

    start, end = min_value, max_value
    if base != "*":
        if "-" in base:
            parts = base.split("-")
            bounds = [_parse_int(p) for p in parts]
            if len(bounds) != 2 or bounds[0] is None or bounds[1] is None:
                raise ParseError(
                    code="E_INVALID_STEP_BASE",
                    message=f"Invalid range in step expression: {base}",
                    expression=expression,
                )
            start, end = bounds[0], bounds[1]
        else:
            parsed = _parse_int(base)
            if parsed is None:
                raise ParseError(
                    code="E_INVALID_STEP_BASE",
                    message=f"Invalid start value in step expression: {base}",
                    expression=expression,
                )
            start = parsed

    return _values(start, end, step)


def _expand_range(expression: str, min_value: int, max_value: int) -> list[int]:
    parts = expression.split("-")
    bounds = [_parse_int(p) for p in parts]
    if len(bounds) != 2 or bounds[0] is None or bounds[1] is None:
        raise ParseError(
            code="E_INVALID_RANGE",
            message=f"Invalid range: {expression}",
            expression=expression,
        )

    start, end = bounds[0], bounds[1]
    if start < min_value or end > max_value or start > end:
        raise ParseError(
            code="E_RANGE_OUT_OF_BOUNDS",
            message=f"Range {expression} is out of bounds ({min_value}-{max_value})",
            expression=expression,
        )
    return _values(start, end, 1)


def _expand_list(expression: str, min_value: int, max_value: int) -> list[int]:
    values: set[int] = set()
    for part in expression.split(","):
        values.update(expand_field(part.strip(), min_value, max_value))
    return sorted(values)


def _values(start: int, end: int, step: int) -> list[int]:
    return list(range(start, end + 1, step))
