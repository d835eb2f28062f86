"""Rendering of command results."""
import json
from enum import Enum
from typing import Dict, List, Sequence

import yaml


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


def format_table(rows: Sequence[Sequence[str]], padding: int = 2) -> str:
    """Align cells into columns.

    Every column but the last is padded to its widest cell plus `padding`
    spaces. Trailing whitespace is stripped from each line.
    """
    if not rows:
        return ""
    columns = max(len(row) for row in rows)
    widths = [0] * columns
    for row in rows:
        for i, cell in enumerate(row[:-1]):
            widths[i] = max(widths[i], len(cell))

    lines = []
    for row in rows:
        cells = [cell.ljust(widths[i] + padding) for i, cell in enumerate(row[:-1])]
        cells.append(row[-1] if row else "")
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)


def render_users(groups: Dict[str, List[str]], output: OutputFormat = OutputFormat.TABLE) -> str:
    """Render a user id to groups mapping, sorted by id."""
    if output == OutputFormat.JSON:
        return json.dumps([{"id": u, "groups": groups[u]} for u in sorted(groups)], indent=2)
    if output == OutputFormat.YAML:
        return yaml.safe_dump([{"id": u, "groups": groups[u]} for u in sorted(groups)], sort_keys=False).rstrip()
    rows = [["ID", "", "GROUPS"]]
    rows.extend([u, "", ", ".join(groups[u])] for u in sorted(groups))
    return format_table(rows)
