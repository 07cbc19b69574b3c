"""Rich/JSON output for ServiceResult.

Renderers are dispatched by ``result.op``; unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from repolayout.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from repolayout.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags taken from the global CLI options."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _render_quiet(result)

    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, settings.verbose)
    else:
        _render_error(result, console, settings.verbose)
    return get_output(console).rstrip("\n")


def _render_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "path" in result.data:
        return str(result.data["path"])
    if "factory" in result.data:
        return str(result.data["factory"])
    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("name", "")) for item in items if item.get("enabled"))
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="rl.ok"), Text(f"  {result.op}", style="rl.op"), sep="")


def _field(console: Console, key: str, value: Any) -> None:
    if isinstance(value, (dict, list)):
        value = _json.dumps(value, separators=(",", ":"))
    style = {"factory": "rl.name", "path": "rl.path"}.get(key, "")
    console.print(Text(f"  {key}: ", style="rl.key"), Text(str(value), style=style), sep="")


def _render_generic(result: ServiceResult, console: Console, verbose: bool) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_resolve(result: ServiceResult, console: Console, verbose: bool) -> None:
    _status_line(console, result)
    data = result.data
    repo = data.get("repository", {})
    _field(console, "repository", f"{repo.get('url')} ({repo.get('content_type')})")
    for key in ("factory", "layout", "artifact", "path"):
        if key in data:
            _field(console, key, data[key])
    if verbose and data.get("rejected"):
        console.print(Text("  rejected:", style="rl.key"))
        for reason in data["rejected"]:
            console.print(f"    - {reason}", markup=False)


def _render_factories(result: ServiceResult, console: Console, verbose: bool) -> None:
    _status_line(console, result)
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Factory")
    table.add_column("Priority", justify="right")
    table.add_column("Status")
    for position, item in enumerate(result.data.get("items", []), start=1):
        enabled = item.get("enabled", True)
        table.add_row(
            str(position),
            Text(str(item["name"]), style="rl.name" if enabled else "rl.disabled"),
            str(item["priority"]),
            "enabled" if enabled else "disabled",
        )
    console.print(table)


def _render_error(result: ServiceResult, console: Console, verbose: bool) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(Text("ERROR", style="rl.error"), Text(f"  {result.op}", style="rl.op"), sep="")
    console.print(f"  {message}", markup=False)
    if error and verbose:
        for key, value in error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console, bool], None]] = {
    "resolve": _render_resolve,
    "list_factories": _render_factories,
}
