"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from cpcommon.output.console import render_to_text

if TYPE_CHECKING:
    from rich.console import Console

    from cpcommon.services.result import ServiceResult


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    if not result.ok:
        return render_to_text(lambda console: _render_error(result, console))
    renderer = _OP_RENDERERS.get(result.op, _render_generic)
    return render_to_text(lambda console: renderer(result, console))


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="cp.ok"), Text(f"  {result.op}", style="cp.op"))


def _field(console: Console, key: str, value: Any) -> None:
    style = "cp.id" if key == "id" else "cp.code" if key == "code" else ""
    console.print(Text(f"  {key}: ", style="cp.key"), Text(str(value), style=style), sep="")


def _optional(value: Any) -> str:
    return "" if value is None else str(value)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_classifications(result: ServiceResult, console: Console) -> None:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Classification", style="cp.name", no_wrap=True)
    table.add_column("Constants", justify="right")
    table.add_column("Factory Key", style="dim")
    for item in result.data.get("classifications", []):
        table.add_row(item["name"], str(item["count"]), _optional(item.get("factory_key")))
    console.print(table)


def _render_constants(result: ServiceResult, console: Console) -> None:
    table = Table(
        title=result.data.get("classification"),
        show_header=True,
        pad_edge=False,
        expand=False,
    )
    table.add_column("ID", style="cp.id", justify="right")
    table.add_column("Code", style="cp.code")
    table.add_column("Description")
    table.add_column("External Code")
    table.add_column("Seq", style="dim", justify="right")
    for item in result.data.get("constants", []):
        table.add_row(
            str(item["id"]),
            item["code"],
            item["description"],
            _optional(item.get("external_code")),
            _optional(item.get("sequence")),
        )
    console.print(table)


def _render_constant(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "classification", result.data.get("classification"))
    constant = result.data.get("constant")
    if constant is None:
        _field(console, "constant", None)
        return
    for key, value in constant.items():
        if value is not None:
            _field(console, key, value)


def _render_error(result: ServiceResult, console: Console) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text("ERROR", style="cp.error"),
        Text(f"  {result.op}{code}", style="cp.op"),
        Text(" - "),
        Text(msg),
        sep="",
    )


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "list_classifications": _render_classifications,
    "list_constants": _render_constants,
    "lookup": _render_constant,
    "convert": _render_constant,
}
