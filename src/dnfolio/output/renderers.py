"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from dnfolio.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from dnfolio.services.result import ServiceResult


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

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(_extract_key(item) for item in items if _extract_key(item))
    if "slug" in result.data:
        return f"{result.data.get('category', '')}/{result.data['slug']}"
    if "path" in result.data:
        return str(result.data["path"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_key(item: Any) -> str:
    """``category/slug`` for posts, ``name`` for tags."""
    if not isinstance(item, dict):
        return ""
    if "slug" in item:
        return f"{item.get('category', '')}/{item['slug']}"
    return str(item.get("name", ""))


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="dn.ok")
    op = Text(f"  {result.op}", style="dn.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dn.key")
    if key == "slug":
        v = Text(str(value), style="dn.slug")
    elif key == "path":
        v = Text(str(value), style="dn.path")
    elif key == "title":
        v = Text(str(value), style="dn.title")
    elif key in ("createdAt", "updatedAt"):
        v = Text(str(value), style="dn.date")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult, *, verbose: bool) -> None:
    if verbose and result.meta:
        console.print()
        console.print(Text("  meta:", style="dim"))
        for k, v in result.meta.items():
            console.print(f"    {k}: {v}")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _render_meta(console, result, verbose=verbose)


def _render_post_list(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print(Text("  No published posts.", style="dim"))
        _render_meta(console, result, verbose=verbose)
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Created", style="dn.date", no_wrap=True)
    table.add_column("Category", style="dn.category")
    table.add_column("Slug", style="dn.slug")
    table.add_column("Title", style="dn.title")
    table.add_column("Tags", style="dn.tag")
    for item in items:
        table.add_row(
            str(item.get("createdAt", "")),
            str(item.get("category", "")),
            str(item.get("slug", "")),
            str(item.get("title", "")),
            ", ".join(item.get("tags", [])),
        )
    console.print(table)
    console.print(Text(f"  {result.data.get('count', len(items))} posts", style="dim"))
    _render_meta(console, result, verbose=verbose)


def _render_post(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    data = result.data
    for key in ("title", "category", "slug", "createdAt", "updatedAt", "description", "path"):
        value = data.get(key)
        if value:
            _field(console, key, value)
    if data.get("tags"):
        _field(console, "tags", ", ".join(data["tags"]))
    for key in ("prev", "next"):
        ref = data.get(key)
        if ref:
            _field(console, key, f"{ref['title']} ({ref['url']})")
    content = data.get("content", "")
    if content:
        console.print()
        console.print(content.rstrip("\n"), markup=False)


def _render_tags(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Tag", style="dn.tag")
    table.add_column("Posts", justify="right")
    if verbose:
        table.add_column("Slugs", style="dn.slug")
    for item in result.data.get("items", []):
        row = [str(item["name"]), str(item["count"])]
        if verbose:
            row.append(", ".join(item.get("posts", [])))
        table.add_row(*row)
    console.print(table)


def _render_categories(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    for category in result.data.get("categories", []):
        console.print(
            Text(f"  {category['name']}", style="dn.category"),
            Text(f" ({category['count']})", style="dim"),
            sep="",
        )
        for ref in category.get("posts", []):
            console.print(Text(f"    {ref['slug']}", style="dn.slug"), Text(f"  {ref['title']}"), sep="")
    archive = result.data.get("archive", [])
    if archive:
        console.print()
        console.print(Text("  archive:", style="dn.key"))
        for month in archive:
            console.print(
                Text(f"    {month['month']}", style="dn.date"),
                Text(f" ({month['count']})", style="dim"),
                sep="",
            )


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    label = Text("ERROR", style="dn.error")
    op = Text(f"  {result.op}", style="dn.op")
    msg = result.error.message if result.error else "Unknown error"
    console.print(label, op, Text(f" — {msg}"), sep="")
    if verbose and result.error and result.error.detail:
        for key, value in result.error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "list_posts": _render_post_list,
    "get_post": _render_post,
    "find_post": _render_post,
    "list_tags": _render_tags,
    "list_categories": _render_categories,
}
