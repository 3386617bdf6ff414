"""Output formatters — rich table and JSON."""

import json

from rich import box
from rich.table import Table
from rich.text import Text


def build_table(
    groups: dict[str, int], group_key: str = "type", total_bytes: int | None = None
) -> Table:
    """Two-column table: group identifier and accumulated size in bytes.

    Long group names fold onto extra lines instead of being truncated.
    """
    caption = f"Total: {total_bytes} bytes" if total_bytes is not None else None
    table = Table(box=box.ROUNDED, caption=caption)
    table.add_column(Text(group_key.capitalize()), overflow="fold")
    table.add_column(Text("Size [byte]"), justify="right", no_wrap=True)
    for group, size in groups.items():
        table.add_row(Text(group), str(size))
    return table


def format_json(groups: dict[str, int], group_key: str = "type") -> str:
    return json.dumps({"group_key": group_key, "groups": groups}, indent=2)
