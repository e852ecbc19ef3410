from __future__ import annotations

import json
from typing import Any

import yaml

from cron_expander.core.model import FIELD_SPECS, ParsedSchedule


LABEL_WIDTH = 14


def format_schedule(schedule: ParsedSchedule) -> str:
    """Render one line per field plus the command, labels padded to LABEL_WIDTH."""
    lines: list[str] = []
    for spec in FIELD_SPECS:
        values = " ".join(str(v) for v in schedule.values_for(spec.name))
        lines.append(f"{spec.label.ljust(LABEL_WIDTH)}{values}")
    lines.append(f"{'command'.ljust(LABEL_WIDTH)}{schedule.command}")
    return "\n".join(lines)


def schedule_to_dict(schedule: ParsedSchedule) -> dict[str, Any]:
    out: dict[str, Any] = {spec.name: list(schedule.values_for(spec.name)) for spec in FIELD_SPECS}
    out["command"] = schedule.command
    return out


def dump_schedule_json(schedule: ParsedSchedule) -> str:
    return json.dumps(schedule_to_dict(schedule), indent=2)


def dump_schedule_yaml(schedule: ParsedSchedule) -> str:
    return yaml.safe_dump(
        schedule_to_dict(schedule), sort_keys=False, default_flow_style=False, allow_unicode=True
    )
