"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from passctl.output.console import create_console, get_output, style_for_pass_style

if TYPE_CHECKING:
    from rich.console import Console, RenderableType

    from passctl.services.result import ServiceResult


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
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    # For list results, return IDs only
    items = result.data.get("items")
    if items and isinstance(items, list):
        ids = [str(item["id"]) for item in items if isinstance(item, dict) and "id" in item]
        return "\n".join(ids)

    if result.op == "validate":
        return "valid" if result.data.get("valid") else "invalid"

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="pass.ok")
    op = Text(f"  {result.op}", style="pass.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pass.key")
    if key == "path":
        v = Text(str(value), style="pass.path")
    elif key == "style":
        v = Text(str(value), style=style_for_pass_style(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _field_cell(field: dict[str, Any]) -> Text:
    """Label over value, as a wallet shows a field."""
    cell = Text()
    cell.append(str(field.get("label") or field.get("key", "")), style="pass.label")
    cell.append("\n")
    cell.append(str(field.get("value", "")), style="pass.value")
    return cell


def _field_grid(fields: list[dict[str, Any]], *, justify: str = "left") -> RenderableType:
    if not fields:
        return Text("")
    grid = Table.grid(padding=(0, 3), expand=True)
    for _ in fields:
        grid.add_column(justify=justify)
    grid.add_row(*(_field_cell(f) for f in fields))
    return grid


def _image_line(label: str, image: dict[str, Any] | None) -> Text:
    if image is None:
        return Text(f"[{label}]", style="pass.placeholder")
    return Text(f"[{label}: {image.get('file_name') or image.get('url')}]", style="pass.path")


def _band(band: dict[str, Any] | None) -> Text | None:
    if band is None:
        return None
    if band.get("image") is None:
        return Text(f"[{band.get('placeholder') or 'no image'}]", style="pass.placeholder")
    return _image_line(str(band.get("slot") or "image"), band["image"])


_SEVERITY_STYLES = {"error": "pass.error", "warning": "pass.warning"}


def _issue_line(console: Console, issue: dict[str, Any]) -> None:
    sev = str(issue.get("severity", "warning"))
    line = Text("  ")
    line.append(sev, style=_SEVERITY_STYLES.get(sev, ""))
    line.append(f" {issue.get('field')}: {issue.get('message')}")
    console.print(line)


def _barcode(barcode: dict[str, Any]) -> Text:
    symbology = str(barcode.get("format", "")).removeprefix("PKBarcodeFormat")
    shape = "square" if barcode.get("square") else "linear"
    line = Text(f"▥ {symbology} ({shape}) ", style="dim")
    line.append(str(barcode.get("message") or "<empty>"), style="pass.value")
    if barcode.get("alt_text"):
        line.append(f"  {barcode['alt_text']}", style="pass.label")
    return line


def _card(parts: list[RenderableType], *, title: str, style: str, colors: dict[str, Any]) -> Panel:
    subtitle = (
        f"bg {colors.get('background_color')} · fg {colors.get('foreground_color')} · "
        f"label {colors.get('label_color')}"
    )
    return Panel(
        Group(*parts),
        title=title,
        subtitle=subtitle,
        border_style=style_for_pass_style(style) or "dim",
        width=64,
    )


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pass.error")
    op = Text(f"  {result.op}", style="pass.op")
    dash = Text(" — ")
    console.print(label, op, dash, msg, sep="")

    if err and err.detail.get("errors") and isinstance(err.detail["errors"], list):
        for issue in err.detail["errors"]:
            _issue_line(console, issue)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            if k != "errors":
                console.print(f"    {k}: {v}")


# ── Mutation renderers ────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render any draft edit: what changed and the live validation summary."""
    _status_line(console, result)
    d = result.data
    for key in ("path", "style", "group", "slot", "index", "remaining"):
        if key in d:
            _field(console, key, d[key])
    _field(console, "changed", "yes" if d.get("changed") else "no")
    valid = d.get("valid")
    verdict = Text("  draft: ", style="pass.key")
    if valid:
        verdict.append("valid", style="pass.ok")
    else:
        verdict.append("invalid", style="pass.error")
    verdict.append(f" ({d.get('error_count', 0)} errors, {d.get('warning_count', 0)} warnings)")
    console.print(verdict)
    if verbose:
        _render_meta(console, result)


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("path", "style", "template_id"):
        if result.data.get(key) is not None:
            _field(console, key, result.data[key])


# ── Draft renderers ───────────────────────────────────────────────────


def _render_templates(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the template catalog as a table."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="bold", no_wrap=True)
    table.add_column("Name")
    table.add_column("Style")
    if verbose:
        table.add_column("Description", style="dim")
    for item in items:
        style = str(item.get("style", ""))
        row: list[Any] = [
            str(item.get("id", "")),
            str(item.get("name", "")),
            Text(style, style=style_for_pass_style(style)),
        ]
        if verbose:
            row.append(str(item.get("description", "")))
        table.add_row(*row)
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} templates")


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the stored draft: content, fields per group, images, barcode."""
    d = result.data
    draft = d.get("draft", {})
    content = draft.get("content", {})
    style = str(d.get("style", ""))

    lines = Text()
    lines.append(f"description: {content.get('description', '')}\n")
    if content.get("organization_name"):
        lines.append(f"organization: {content['organization_name']}\n")
    if content.get("logo_text"):
        hidden = " (hidden)" if content.get("hide_logo_text") else ""
        lines.append(f"logo text: {content['logo_text']}{hidden}\n")
    barcode = draft.get("barcode", {})
    lines.append(f"barcode: {barcode.get('format', '')} {barcode.get('message') or '<empty>'}\n")
    stamp = draft.get("stamp_config")
    if stamp:
        lines.append(f"stamps: {stamp.get('current')} / {stamp.get('total')} {stamp.get('icon')}\n")
    images = draft.get("images", {})
    if images:
        lines.append("images: " + ", ".join(sorted(images)) + "\n")
    relevance = draft.get("relevance") or {}
    for index, place in enumerate(relevance.get("locations", [])):
        note = f" \"{place['relevant_text']}\"" if place.get("relevant_text") else ""
        lines.append(f"location {index}: {place['latitude']}, {place['longitude']}{note}\n")
    if relevance.get("relevant_date"):
        lines.append(f"relevant date: {relevance['relevant_date']}\n")
    if relevance.get("max_distance"):
        lines.append(f"max distance: {relevance['max_distance']} m\n")

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Group", style="pass.key")
    table.add_column("#", justify="right")
    table.add_column("Key", style="bold")
    table.add_column("Label")
    table.add_column("Value")
    for group, fields in draft.get("fields", {}).items():
        for index, item in enumerate(fields):
            table.add_row(
                group,
                str(index),
                str(item.get("key", "")),
                str(item.get("label", "")),
                str(item.get("value", "")),
            )

    title = f"{d.get('display_name', style)} ({style})"
    console.print(
        Panel(
            Group(lines, table),
            title=title,
            border_style=style_for_pass_style(style) or "dim",
            expand=False,
        )
    )
    if verbose:
        _field(console, "path", d.get("path", ""))


def _render_capacity(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render per-group field capacity as a table."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Group")
    table.add_column("Count", justify="right")
    table.add_column("Limit", justify="right")
    table.add_column("Remaining", justify="right")
    for row in result.data.get("groups", []):
        remaining = row.get("remaining")
        style = "pass.ok" if row.get("can_add") else "pass.warning"
        table.add_row(
            str(row.get("group", "")),
            str(row.get("count", 0)),
            str(row.get("limit", "")),
            Text(str(remaining), style=style),
        )
    console.print(table)


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render validator findings, errors first."""
    d = result.data
    issues = [*d.get("errors", []), *d.get("warnings", [])]
    if not issues:
        console.print("[pass.ok]OK[/pass.ok]  Draft is valid, no warnings.")
        return

    for issue in issues:
        _issue_line(console, issue)
        if verbose:
            console.print(f"    code: {issue.get('code')}", style="dim")

    if d.get("exportable"):
        verdict = "[pass.ok]exportable[/pass.ok]"
    else:
        verdict = "[pass.error]export blocked[/pass.error]"
    counts = f"{d.get('error_count', 0)} errors, {d.get('warning_count', 0)} warnings"
    console.print(f"\n{counts} — {verdict}")


# ── Preview renderers ─────────────────────────────────────────────────


def _render_apple_front(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Draw the Apple front face: header, style body, barcode."""
    d = result.data
    header = d.get("header", {})
    body = d.get("body", {})
    parts: list[RenderableType] = []

    head = Table.grid(expand=True)
    head.add_column(ratio=1)
    head.add_column(justify="right")
    logo: Text = _image_line("logo", header.get("logo")) if header.get("logo") else Text("")
    if header.get("logo_text"):
        logo.append(f" {header['logo_text']}", style="bold")
    head.add_row(logo, _field_grid(header.get("fields", []), justify="right"))
    parts.append(head)

    if body.get("background"):
        parts.append(_image_line("background", body["background"]))
    strip = _band(body.get("strip"))
    if strip is not None:
        parts.append(strip)

    primary = _field_grid(body.get("primary", []))
    if body.get("thumbnail"):
        beside = Table.grid(expand=True)
        beside.add_column(ratio=1)
        beside.add_column(justify="right")
        beside.add_row(primary, _image_line("thumbnail", body["thumbnail"]))
        parts.append(beside)
    else:
        parts.append(primary)

    for row in body.get("rows", []):
        parts.append(_field_grid(row.get("fields", [])))

    parts.append(Text(""))
    parts.append(_barcode(d.get("barcode", {})))
    style = str(d.get("style", ""))
    console.print(_card(parts, title=f"Apple · {style}", style=style, colors=d.get("colors", {})))


def _render_apple_back(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    parts: list[RenderableType] = []
    fields = d.get("fields", [])
    if not fields:
        parts.append(Text(str(d.get("empty_message") or ""), style="pass.placeholder"))
    for item in fields:
        parts.append(_field_cell(item))
        parts.append(Text(""))
    style = str(d.get("style", ""))
    title = f"Apple · {style} · back"
    console.print(_card(parts, title=title, style=style, colors=d.get("colors", {})))


def _render_google(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Draw the Google card: logo and name, title, first primary, barcode, image band."""
    d = result.data
    parts: list[RenderableType] = []
    head = Text()
    if d.get("logo"):
        head.append_text(_image_line("logo", d["logo"]))
        head.append(" ")
    head.append(str(d.get("name", "")), style="bold")
    parts.append(head)
    parts.append(Text(str(d.get("title", "")), style="pass.value"))
    if d.get("primary"):
        parts.append(_field_cell(d["primary"]))
    parts.append(Text(""))
    parts.append(_barcode(d.get("barcode", {})))
    band = _band(d.get("image_band"))
    if band is not None:
        parts.append(band)
    style = str(d.get("style", ""))
    console.print(_card(parts, title=f"Google · {style}", style=style, colors=d.get("colors", {})))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":"), ensure_ascii=False))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Draft
    "templates": _render_templates,
    "show_draft": _render_show,
    "capacity": _render_capacity,
    "validate": _render_validate,
    "export": _render_export,
    # Mutations
    "new_draft": _render_mutation,
    "add_field": _render_mutation,
    "update_field": _render_mutation,
    "remove_field": _render_mutation,
    "move_field": _render_mutation,
    "set_image": _render_mutation,
    "clear_image": _render_mutation,
    "set_colors": _render_mutation,
    "set_content": _render_mutation,
    "set_barcode": _render_mutation,
    "change_style": _render_mutation,
    "set_stamps": _render_mutation,
    "apply_stamps": _render_mutation,
    "add_location": _render_mutation,
    "remove_location": _render_mutation,
    "set_relevance": _render_mutation,
    # Preview
    "preview_apple": _render_apple_front,
    "preview_apple_back": _render_apple_back,
    "preview_google": _render_google,
}
