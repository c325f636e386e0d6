"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from timewizard.output.console import create_console, get_output, style_for_outcome

if TYPE_CHECKING:
    from rich.console import Console

    from timewizard.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


# Keys whose value is the whole answer in --quiet mode.
_QUIET_KEYS: dict[str, str] = {
    "parse": "instant",
    "week": "monday",
    "relative": "phrase",
    "count": "count",
}


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    key = _QUIET_KEYS.get(result.op)
    if key is not None:
        value = result.data.get(key)
        return "" if value is None else str(value)

    if result.op == "annotate":
        counts = result.data.get("counts", {})
        return str(counts.get("annotated", 0))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="tw.ok")
    op = Text(f"  {result.op}", style="tw.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tw.key")
    if key in ("instant", "monday", "phrase"):
        v = Text(str(value), style="tw.instant")
    elif key == "raw":
        v = Text(str(value), style="tw.raw")
    elif isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _element_table(elements: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    """Build a Rich Table with one row per processed element."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Datetime", style="tw.raw")
    table.add_column("Shape")
    table.add_column("Outcome")
    table.add_column("Instant", style="tw.instant", no_wrap=True)
    table.add_column("Relative")
    if verbose:
        table.add_column("Error", style="tw.error")

    for item in elements:
        outcome = str(item.get("outcome", ""))
        row: list[str | Text] = [
            str(item.get("index", "")),
            str(item.get("raw") or ""),
            str(item.get("shape") or ""),
            Text(outcome, style=style_for_outcome(outcome)),
            str(item.get("instant") or ""),
            str(item.get("relative") or ""),
        ]
        if verbose:
            row.append(str(item.get("error") or ""))
        table.add_row(*row)

    return table


# ── Operation renderers ───────────────────────────────────────────────


def _render_annotate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    for key in ("source", "target", "written"):
        if key in data:
            _field(console, key, data[key])

    counts: dict[str, int] = data.get("counts", {})
    summary = ", ".join(f"{name}={n}" for name, n in counts.items() if n or verbose)
    _field(console, "counts", summary or "no elements")

    elements = data.get("elements", [])
    if elements:
        console.print(_element_table(elements, verbose=verbose))


def _render_fields(*keys: str) -> Callable[..., None]:
    """Build a renderer printing *keys* of ``result.data`` in order."""

    def render(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
        _status_line(console, result)
        for key in keys:
            value = result.data.get(key)
            if value is not None:
                _field(console, key, value)

    return render


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tw.error")
    op = Text(f"  {result.op}", style="tw.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "annotate": _render_annotate,
    "parse": _render_fields("raw", "shape", "instant", "local", "relative"),
    "week": _render_fields("year", "week", "monday", "instant"),
    "relative": _render_fields("days", "phrase"),
    "count": _render_fields("char", "count"),
}
