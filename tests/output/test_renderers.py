"""Tests for operation-specific Rich renderers."""

from typing import Any

from flavorhub.output.renderers import render_quiet, render_result
from flavorhub.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


def _recipe(rid: int, name: str, **fields: Any) -> dict[str, Any]:
    return {
        "id": rid,
        "name": name,
        "created": "2024-04-09T10:00:00+00:00",
        "modified": "2024-04-09T10:00:00+00:00",
        **fields,
    }


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("get_recipe", "NOT_FOUND", "No recipe with id 9"))
        assert "ERROR" in output
        assert "get_recipe" in output
        assert "No recipe with id 9" in output

    def test_verbose_shows_detail(self) -> None:
        output = render_result(_err("get_recipe", "NOT_FOUND", "Bad", id=9), verbose=True)
        assert "detail" in output
        assert "id: 9" in output

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="test"))
        assert "Unknown error" in output

    def test_markup_in_message_is_literal(self) -> None:
        output = render_result(_err("save_recipe", "VALIDATION_ERROR", "bad [bold]name[/bold]"))
        assert "[bold]name[/bold]" in output


# ── Recipe lists ─────────────────────────────────────────────────────


class TestRecipeListRenderer:
    def test_table(self) -> None:
        items = [
            _recipe(1, "Pad Thai", difficulty_level="MEDIUM", cuisine_type="Thai",
                    total_time_minutes=35),
            _recipe(2, "Toast"),
        ]
        output = render_result(_ok("list_recipes", count=2, items=items, filters={}))
        assert "Pad Thai" in output
        assert "MEDIUM" in output
        assert "Thai" in output
        assert "35 min" in output
        assert "Toast" in output
        assert "2 recipes" in output

    def test_empty(self) -> None:
        output = render_result(_ok("search_recipes", count=0, items=[], filters={}))
        assert "0 recipes" in output

    def test_filters_shown(self) -> None:
        output = render_result(
            _ok("list_recipes", count=0, items=[], filters={"difficulty_level": "HARD"})
        )
        assert "filters: difficulty_level=HARD" in output

    def test_verbose_columns(self) -> None:
        items = [_recipe(1, "Stew", servings=4)]
        output = render_result(_ok("list_recipes", count=1, items=items), verbose=True)
        assert "Servings" in output
        assert "Modified" in output

    def test_brackets_in_name_are_literal(self) -> None:
        items = [_recipe(1, "Soup [vegan]")]
        output = render_result(_ok("list_recipes", count=1, items=items))
        assert "Soup [vegan]" in output


# ── Single recipe ────────────────────────────────────────────────────


class TestRecipeRenderer:
    def test_panel(self) -> None:
        data = _recipe(
            7,
            "Shakshuka",
            difficulty_level="EASY",
            cuisine_type="Tunisian",
            servings=2,
            prep_time_minutes=10,
            cook_time_minutes=20,
            total_time_minutes=30,
            description="Eggs poached in tomato sauce.",
        )
        output = render_result(ServiceResult(ok=True, op="get_recipe", data=data))
        assert "7" in output
        assert "Shakshuka" in output
        assert "cuisine type: Tunisian" in output
        assert "total time: 30 min" in output
        assert "Eggs poached in tomato sauce." in output

    def test_no_details(self) -> None:
        output = render_result(ServiceResult(ok=True, op="get_recipe", data=_recipe(1, "Bare")))
        assert "(no details)" in output


class TestMutationRenderers:
    def test_saved_created(self) -> None:
        data = {**_recipe(4, "Flan"), "created_new": True}
        output = render_result(ServiceResult(ok=True, op="save_recipe", data=data))
        assert "save_recipe" in output
        assert "action: created" in output
        assert "name: Flan" in output

    def test_saved_updated(self) -> None:
        data = {**_recipe(4, "Flan"), "created_new": False}
        output = render_result(ServiceResult(ok=True, op="save_recipe", data=data))
        assert "action: updated" in output

    def test_deleted(self) -> None:
        output = render_result(_ok("delete_recipe", id=4, name="Flan", deleted=True))
        assert "delete_recipe" in output
        assert "id: 4" in output
        assert "name: Flan" in output


class TestDailyRenderer:
    def test_pick(self) -> None:
        output = render_result(
            _ok(
                "daily_recipe",
                date="2024-04-09",
                seed=2024100,
                total=3,
                index=0,
                recipe=_recipe(1, "Gazpacho"),
            )
        )
        assert "Recipe of the day 2024-04-09" in output
        assert "Gazpacho" in output
        assert "seed" not in output

    def test_verbose_shows_seed(self) -> None:
        output = render_result(
            _ok("daily_recipe", date="2024-04-09", seed=2024100, total=3, index=0,
                recipe=_recipe(1, "Gazpacho")),
            verbose=True,
        )
        assert "seed: 2024100" in output
        assert "index: 0" in output

    def test_empty(self) -> None:
        output = render_result(
            _ok("daily_recipe", date="2024-04-09", seed=2024100, total=0, index=None, recipe=None)
        )
        assert "No recipe of the day for 2024-04-09" in output


class TestUpgradeRenderer:
    def test_check(self) -> None:
        output = render_result(
            _ok(
                "upgrade",
                pending_count=1,
                pending=[{"revision": "001_baseline", "description": "Baseline schema"}],
                current=None,
                head="001_baseline",
            )
        )
        assert "pending_count: 1" in output
        assert "001_baseline  Baseline schema" in output

    def test_up_to_date(self) -> None:
        output = render_result(
            _ok("upgrade", applied_count=0, current="001_baseline",
                message="Database is already up to date")
        )
        assert "Database is already up to date" in output


class TestGenericRenderer:
    def test_fallback(self) -> None:
        output = render_result(_ok("init", root="/tmp/book", current="001_baseline"))
        assert "OK" in output
        assert "init" in output
        assert "root: /tmp/book" in output

    def test_verbose_meta(self) -> None:
        result = ServiceResult(ok=True, op="init", data={}, meta={"duration_ms": 3})
        assert "duration_ms: 3" in render_result(result, verbose=True)


# ── Quiet mode ───────────────────────────────────────────────────────


class TestRenderQuiet:
    def test_ids_for_lists(self) -> None:
        items = [_recipe(3, "a"), _recipe(5, "b")]
        assert render_quiet(_ok("list_recipes", count=2, items=items)) == "3\n5"

    def test_empty_list(self) -> None:
        assert render_quiet(_ok("search_recipes", count=0, items=[])) == ""

    def test_daily_id(self) -> None:
        assert render_quiet(_ok("daily_recipe", recipe=_recipe(8, "x"))) == "8"

    def test_daily_empty(self) -> None:
        assert render_quiet(_ok("daily_recipe", recipe=None)) == ""

    def test_status(self) -> None:
        assert render_quiet(_ok("delete_recipe", id=1)) == "OK: delete_recipe"

    def test_error(self) -> None:
        output = render_quiet(_err("get_recipe", "NOT_FOUND", "missing"))
        assert output.startswith("ERROR: get_recipe")
        assert "missing" in output
