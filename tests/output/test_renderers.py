"""Tests for operation-specific Rich renderers."""

from passctl.output.renderers import render_quiet, render_result
from passctl.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


def _issue(field: str, message: str, severity: str = "error") -> dict[str, str]:
    return {"field": field, "code": "required", "message": message, "severity": severity}


def _band(placeholder: str | None = None) -> dict[str, object]:
    return {"slot": None, "image": None, "placeholder": placeholder}


_COLORS = {"background_color": "#000000", "foreground_color": "#FFFFFF", "label_color": "#999"}
_BARCODE = {"format": "PKBarcodeFormatQR", "message": "CUST-1", "alt_text": None, "square": True}


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("show_draft", "NO_DRAFT", "No draft at pass-draft.json"))
        assert "ERROR" in output
        assert "show_draft" in output
        assert "No draft at pass-draft.json" in output

    def test_lists_blocking_issues(self) -> None:
        result = _err(
            "export",
            "INVALID_DRAFT",
            "export blocked",
            errors=[_issue("barcode.message", "Barcode message is required")],
        )
        output = render_result(result)
        assert "barcode.message: Barcode message is required" in output

    def test_verbose_shows_detail(self) -> None:
        output = render_result(_err("show_draft", "X", "Bad", path="p.json"), verbose=True)
        assert "detail" in output
        assert "path: p.json" in output

    def test_error_line_spacing(self) -> None:
        output = render_result(_err("show_draft", "NO_DRAFT", "No draft"))
        assert output.splitlines()[0] == "ERROR  show_draft — No draft"

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="test"))


# ── Mutations and draft ops ──────────────────────────────────────────


class TestMutationRenderer:
    def test_mutation(self) -> None:
        result = _ok(
            "add_field",
            path="pass-draft.json",
            style="coupon",
            changed=True,
            valid=False,
            error_count=1,
            warning_count=0,
            group="headerFields",
            remaining=2,
        )
        output = render_result(result)
        assert "OK" in output
        assert "group: headerFields" in output
        assert "remaining: 2" in output
        assert "changed: yes" in output
        assert "invalid (1 errors, 0 warnings)" in output

    def test_single_space_after_key(self) -> None:
        result = _ok(
            "add_location",
            path="pass-draft.json",
            style="storeCard",
            changed=True,
            valid=True,
            error_count=0,
            warning_count=0,
        )
        lines = render_result(result).splitlines()
        assert lines[0] == "OK  add_location"
        assert "  style: storeCard" in lines


class TestDraftRenderers:
    def test_templates(self) -> None:
        items = [{"id": "gutschein", "name": "Gutschein", "description": "d", "style": "coupon"}]
        output = render_result(_ok("templates", count=1, items=items))
        assert "gutschein" in output
        assert "1 templates" in output

    def test_capacity(self) -> None:
        row = {"group": "backFields", "count": 0, "limit": "unlimited", "remaining": "unlimited"}
        output = render_result(_ok("capacity", style="coupon", groups=[{**row, "can_add": True}]))
        assert "backFields" in output
        assert "unlimited" in output

    def test_validate_clean(self) -> None:
        output = render_result(_ok("validate", valid=True, exportable=True, errors=[], warnings=[]))
        assert "Draft is valid" in output

    def test_validate_issues(self) -> None:
        result = _ok(
            "validate",
            valid=False,
            exportable=False,
            error_count=1,
            warning_count=1,
            errors=[_issue("barcode.message", "Barcode message is required")],
            warnings=[_issue("images.thumbnail", "thumbnail [hidden]", "warning")],
        )
        output = render_result(result)
        assert "error barcode.message" in output
        assert "warning images.thumbnail: thumbnail [hidden]" in output
        assert "1 errors, 1 warnings" in output
        assert "export blocked" in output

    def test_show(self) -> None:
        draft = {
            "content": {"description": "Digitaler Gutschein"},
            "barcode": {"format": "PKBarcodeFormatQR", "message": ""},
            "fields": {"primaryFields": [{"key": "value", "label": "RABATT", "value": "20%"}]},
        }
        result = _ok("show_draft", style="coupon", display_name="Gutschein", draft=draft)
        output = render_result(result)
        assert "Gutschein (coupon)" in output
        assert "RABATT" in output
        assert "<empty>" in output

    def test_show_relevance(self) -> None:
        draft = {
            "content": {"description": "Karte"},
            "barcode": {"format": "PKBarcodeFormatQR", "message": "1"},
            "fields": {},
            "relevance": {
                "locations": [{"latitude": 53.5, "longitude": 10.0, "relevant_text": None}],
                "relevant_date": "2026-12-24",
                "max_distance": 150,
            },
        }
        output = render_result(_ok("show_draft", style="storeCard", draft=draft))
        assert "location 0: 53.5, 10.0" in output
        assert "relevant date: 2026-12-24" in output
        assert "max distance: 150 m" in output


# ── Previews ─────────────────────────────────────────────────────────


class TestPreviewRenderers:
    def test_apple_front(self) -> None:
        result = _ok(
            "preview_apple",
            style="storeCard",
            colors=_COLORS,
            header={"logo": None, "logo_text": "Café Nord", "fields": []},
            body={
                "strip": _band("Strip image"),
                "primary": [{"key": "stamps", "label": "DEINE STEMPEL", "value": "3 von 10"}],
                "rows": [],
            },
            barcode=_BARCODE,
        )
        output = render_result(result)
        assert "Apple · storeCard" in output
        assert "Café Nord" in output
        assert "[Strip image]" in output
        assert "3 von 10" in output
        assert "CUST-1" in output

    def test_apple_back_empty(self) -> None:
        result = _ok(
            "preview_apple_back",
            style="generic",
            colors=_COLORS,
            fields=[],
            empty_message="No back-side information",
        )
        assert "No back-side information" in render_result(result)

    def test_google(self) -> None:
        result = _ok(
            "preview_google",
            style="coupon",
            colors=_COLORS,
            name="Loyalty Card",
            title="Digitaler Gutschein",
            primary={"key": "value", "label": "RABATT", "value": "20%"},
            barcode=_BARCODE,
            image_band=_band("No banner image"),
        )
        output = render_result(result)
        assert "Google · coupon" in output
        assert "Digitaler Gutschein" in output
        assert "[No banner image]" in output


# ── Generic and quiet ────────────────────────────────────────────────


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("custom_op", key="value", nested={"a": 1}))
        assert "custom_op" in output
        assert "key: value" in output
        assert '{"a":1}' in output


class TestRenderQuiet:
    def test_items_list_ids(self) -> None:
        result = _ok("templates", items=[{"id": "gutschein"}, {"id": "punktekarte"}])
        assert render_quiet(result) == "gutschein\npunktekarte"

    def test_validate(self) -> None:
        assert render_quiet(_ok("validate", valid=True)) == "valid"
        assert render_quiet(_ok("validate", valid=False)) == "invalid"

    def test_error(self) -> None:
        assert render_quiet(_err("export", "INVALID_DRAFT", "blocked")) == "ERROR: export — blocked"
