"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from flavorhub.output.console import create_console, get_output, style_for_difficulty

if TYPE_CHECKING:
    from rich.console import Console

    from flavorhub.services.result import ServiceResult


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
        return "\n".join(str(item["id"]) for item in items if "id" in item)

    if result.op == "daily_recipe":
        recipe = result.data.get("recipe")
        return str(recipe["id"]) if recipe else ""

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="fh.ok"), Text(f"  {result.op}", style="fh.op"), sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="fh.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="fh.id")
    elif key == "name":
        v = Text(str(value), style="fh.name")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _minutes(value: Any) -> str:
    return f"{value} min" if value is not None else ""


def _recipe_table(items: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    """Build a Rich Table for a list of recipes."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="fh.id", no_wrap=True, justify="right")
    table.add_column("Name", style="fh.name")
    table.add_column("Difficulty")
    table.add_column("Cuisine")
    table.add_column("Time", justify="right")
    if verbose:
        table.add_column("Servings", justify="right")
        table.add_column("Modified", style="dim")

    for item in items:
        level = item.get("difficulty_level")
        row: list[Any] = [
            str(item.get("id", "")),
            Text(str(item.get("name", ""))),
            Text(level or "", style=style_for_difficulty(level)),
            Text(item.get("cuisine_type") or ""),
            _minutes(item.get("total_time_minutes")),
        ]
        if verbose:
            servings = item.get("servings")
            row.append("" if servings is None else str(servings))
            row.append(str(item.get("modified", "")))
        table.add_row(*row)

    return table


def _recipe_panel(recipe: dict[str, Any], *, title_prefix: str = "") -> Panel:
    """Build a Rich Panel showing one recipe's metadata and text."""
    lines: list[str] = []
    for key in ("difficulty_level", "cuisine_type", "servings"):
        val = recipe.get(key)
        if val is not None:
            lines.append(f"{key.replace('_', ' ')}: {val}")
    for key in ("prep_time_minutes", "cook_time_minutes", "total_time_minutes"):
        val = recipe.get(key)
        if val is not None:
            lines.append(f"{key.removesuffix('_minutes').replace('_', ' ')}: {_minutes(val)}")

    content = "\n".join(lines)
    for key in ("description", "instructions"):
        text = recipe.get(key)
        if text:
            content += f"\n\n{text.strip()}"

    title = f"{title_prefix}{recipe.get('id', '?')} — {recipe.get('name', 'Untitled')}"
    border = style_for_difficulty(recipe.get("difficulty_level")) or "dim"
    body = Text(content.strip() or "(no details)")
    return Panel(body, title=Text(title), border_style=border, expand=False)


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="fh.error"),
        Text(f"  {result.op}", style="fh.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Recipe renderers ──────────────────────────────────────────────────


def _render_recipe_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_recipes / search_recipes as a table."""
    items = result.data.get("items", [])
    filters = result.data.get("filters") or {}
    if filters:
        shown = ", ".join(f"{k}={v}" for k, v in filters.items())
        console.print(Text(f"filters: {shown}", style="dim"))
    if items:
        console.print(_recipe_table(items, verbose=verbose))
    console.print(f"\n{result.data.get('count', len(items))} recipes")


def _render_recipe(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render get_recipe as a panel."""
    console.print(_recipe_panel(result.data))
    if verbose:
        _render_meta(console, result)


def _render_saved(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render save_recipe as a status line plus key fields."""
    _status_line(console, result)
    d = result.data
    _field(console, "action", "created" if d.get("created_new") else "updated")
    for key in ("id", "name", "difficulty_level", "cuisine_type", "modified"):
        if d.get(key) is not None:
            _field(console, key, d[key])
    if verbose:
        _render_meta(console, result)


def _render_deleted(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("id", "name"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_daily(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the recipe of the day, or a notice when there is none."""
    d = result.data
    recipe = d.get("recipe")
    if recipe is None:
        console.print(Text(f"No recipe of the day for {d.get('date', '?')}", style="fh.warning"))
    else:
        console.print(_recipe_panel(recipe, title_prefix=f"Recipe of the day {d.get('date')}: "))
    if verbose:
        _field(console, "seed", d.get("seed"))
        _field(console, "index", d.get("index"))
        _field(console, "total", d.get("total"))


def _render_upgrade(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render upgrade check/apply/stamp results."""
    _status_line(console, result)
    d = result.data
    for key in ("current", "head", "pending_count", "applied_count", "stamped", "backup_path"):
        if key in d:
            _field(console, key, d[key])
    for rev in d.get("pending", []):
        summary = (rev.get("description") or "").strip().splitlines()
        console.print(f"    {rev['revision']}  {summary[0] if summary else ''}")
    if d.get("message"):
        console.print(f"  {d['message']}")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus every top-level data field."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "list_recipes": _render_recipe_list,
    "search_recipes": _render_recipe_list,
    "get_recipe": _render_recipe,
    "save_recipe": _render_saved,
    "delete_recipe": _render_deleted,
    "daily_recipe": _render_daily,
    "upgrade": _render_upgrade,
}
