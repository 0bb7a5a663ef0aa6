"""Human/JSON rendering of ServiceResult.

``--json`` dumps the full ServiceResult for machines. Human output is a
short status line plus key/value pairs, or a table for listings.
``--quiet`` prints only the primary value (a path) so the CLI composes
with shell pipelines.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

from agelum.output.console import create_console, get_output, style_for_state

if TYPE_CHECKING:
    from agelum.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags taken from the root CLI group."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


# Data key printed alone in --quiet mode, per operation.
_QUIET_KEYS: dict[str, str] = {
    "create": "path",
    "move": "to",
    "get": "path",
}


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def _render_items(result: ServiceResult) -> str:
    console = create_console()
    items: list[dict[str, Any]] = result.data.get("items", [])
    table = Table(title=f"{result.data.get('type', '')} ({len(items)})", show_lines=False)
    has_state = any("state" in item for item in items)
    if has_state:
        table.add_column("State")
    table.add_column("Title", style="agelum.title")
    table.add_column("File", style="agelum.path")
    for item in items:
        row = [escape(str(item.get("title", ""))), escape(str(item.get("name", "")))]
        if has_state:
            state = str(item.get("state", ""))
            row.insert(0, f"[{style_for_state(state)}]{state}[/]" if state else "")
        table.add_row(*row)
    console.print(table)
    return get_output(console).rstrip("\n")


def _render_lines(lines: list[str]) -> str:
    """Render themed markup lines without wrapping (paths stay on one line)."""
    console = create_console()
    for line in lines:
        console.print(line, soft_wrap=True)
    return get_output(console).rstrip("\n")


def format_warning(message: str) -> str:
    """One ``WARNING:`` line for stderr."""
    return _render_lines([f"[agelum.warning]WARNING[/]: {escape(message)}"])


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        code = f" [{result.error.code}]" if result.error and settings.verbose else ""
        return _render_lines(
            [f"[agelum.error]ERROR[/]: [agelum.op]{result.op}[/]{escape(code)}: {escape(message)}"]
        )

    quiet_key = _QUIET_KEYS.get(result.op)
    if settings.quiet and quiet_key and quiet_key in result.data:
        return str(result.data[quiet_key])

    if "items" in result.data:
        return _render_items(result)

    lines = [f"[agelum.ok]OK[/]: [agelum.op]{result.op}[/]"]
    lines.extend(
        f"  [agelum.key]{escape(key)}:[/] {escape(_format_value(value))}"
        for key, value in result.data.items()
    )
    return _render_lines(lines)
