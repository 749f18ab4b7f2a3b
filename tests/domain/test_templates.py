"""Tests for the template catalog."""

from __future__ import annotations

import pytest

from passctl.domain.draft import StampConfig
from passctl.domain.stamps import STAMPS_KEY, stamp_text
from passctl.domain.templates import (
    PASS_TEMPLATES,
    create_default_draft,
    create_draft_from_template,
    get_template,
    list_templates,
    templates_for_style,
)
from passctl.domain.types import FieldGroup, PassStyle
from passctl.domain.validation import validate_draft


class TestCatalog:
    def test_ids(self) -> None:
        assert [t.id for t in list_templates()] == [
            "stempelkarte",
            "stempelkarte_v2",
            "mitgliederkarte",
            "gutschein",
            "punktekarte",
        ]

    def test_get_template(self) -> None:
        template = get_template("gutschein")
        assert template is not None
        assert template.style is PassStyle.COUPON
        assert get_template("nope") is None

    def test_templates_for_style(self) -> None:
        ids = [t.id for t in templates_for_style("storeCard")]
        assert ids == ["stempelkarte", "punktekarte"]

    def test_summary(self) -> None:
        summary = PASS_TEMPLATES[0].summary()
        assert summary["style"] == "storeCard"
        assert set(summary) == {"id", "name", "description", "style"}


class TestCreateFromTemplate:
    def test_unknown_returns_none(self) -> None:
        assert create_draft_from_template("boarding") is None

    @pytest.mark.parametrize("template_id", [t.id for t in PASS_TEMPLATES])
    def test_respects_field_limits(self, template_id: str) -> None:
        draft = create_draft_from_template(template_id)
        assert draft is not None
        assert draft.meta.template_id == template_id
        errors = validate_draft(draft).errors
        assert all(issue.field == "barcode.message" for issue in errors)

    def test_stamp_templates_get_config(self) -> None:
        for template_id in ("stempelkarte", "stempelkarte_v2"):
            draft = create_draft_from_template(template_id)
            assert draft is not None
            assert draft.stamp_config == StampConfig(current=0)
            assert draft.find_field(FieldGroup.PRIMARY, STAMPS_KEY) == 0

    def test_points_card_has_no_stamp_config(self) -> None:
        draft = create_draft_from_template("punktekarte")
        assert draft is not None
        assert draft.stamp_config is None

    @pytest.mark.parametrize("template_id", ["stempelkarte", "stempelkarte_v2"])
    def test_stamp_text_matches_config(self, template_id: str) -> None:
        draft = create_draft_from_template(template_id)
        assert draft is not None
        assert draft.stamp_config is not None
        printed = draft.group(FieldGroup.PRIMARY)[0].value
        assert printed == stamp_text(draft.style, draft.stamp_config)

    def test_coupon_is_exportable(self) -> None:
        draft = create_draft_from_template("gutschein")
        assert draft is not None
        assert validate_draft(draft).valid


class TestDefaultDraft:
    @pytest.mark.parametrize("style", list(PassStyle))
    def test_blank(self, style: PassStyle) -> None:
        draft = create_default_draft(style)
        assert draft.style is style
        assert all(draft.group(group) == () for group in FieldGroup)
        assert draft.images == {}
        assert draft.stamp_config is None
